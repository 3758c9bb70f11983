#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
import argparse
import getpass
import logging
import sys

import httpx

from config import config
from models import Client
from utils.api_client import ApiError, get_api_client
from utils.documents import build_document_categories, get_document_resolver
from utils.formatting import format_currency, format_date
from utils.portfolio import filter_clients
from utils.report_generator import generate_client_summary
from utils.sample_data import sample_clients
from utils.user_store import DuplicateUserError, get_user_store
from utils.validation import validate_user_form


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Insurance Brokerage Back Office",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --list-clients                           # List every client
  python main.py --search fernando                        # Search clients by name, policy no, email or phone
  python main.py --show-client 12                         # Show one client with its documents
  python main.py --check-document /documents/12/nic.pdf   # Try every access method for a stored path
  python main.py --repair-documents                       # Ask the backend to repair document paths
  python main.py --seed-sample-clients                    # Create the sample clients
  python main.py --export-summary 12 -o ./out             # Write a client summary PDF
  python main.py --create-user "Jane" jane@x.lk manager   # Create a back-office user (password prompted)

Web UI:
  streamlit run frontend/app.py

Environment Variables (see .env.example):
  API_URL               REST backend base URL (default: http://localhost:5000/api)
  API_TOKEN             Optional. Bearer token for the backend
  FILE_SERVER_URL       Optional. Static file server root (default: API_URL without /api)
  LOG_LEVEL             Optional. Logging level (default: INFO)
        """
    )

    parser.add_argument(
        "--list-clients",
        action="store_true",
        help="List every client"
    )

    parser.add_argument(
        "--search",
        type=str,
        default=None,
        metavar="TERM",
        help="Search clients by name, policy number, email or phone"
    )

    parser.add_argument(
        "--show-client",
        type=str,
        default=None,
        metavar="ID",
        help="Show a client's details and document slots"
    )

    parser.add_argument(
        "--check-document",
        type=str,
        default=None,
        metavar="PATH",
        help="Run every access strategy for a stored document path and print diagnostics"
    )

    parser.add_argument(
        "--client-id",
        type=str,
        default=None,
        help="Client the checked document belongs to"
    )

    parser.add_argument(
        "--repair-documents",
        action="store_true",
        help="Run the backend document path repair for all clients"
    )

    parser.add_argument(
        "--seed-sample-clients",
        action="store_true",
        help="Create the sample clients on the backend"
    )

    parser.add_argument(
        "--export-summary",
        type=str,
        default=None,
        metavar="ID",
        help="Write a PDF summary for a client"
    )

    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default=None,
        help="Directory for exported summaries (default: ./output_reports)"
    )

    parser.add_argument(
        "--create-user",
        nargs=3,
        default=None,
        metavar=("NAME", "EMAIL", "ROLE"),
        help=f"Create a back-office user; ROLE is one of {', '.join(config.USER_ROLES)}"
    )

    return parser.parse_args(argv)


def validate_environment() -> bool:
    """Validate the environment and configuration."""
    try:
        config.validate()
        return True
    except ValueError as e:
        print(f"[ERROR] Configuration Error: {e}")
        print("\nPlease set API_URL in your .env file or environment.")
        return False


def print_client_table(clients: list[Client]):
    if not clients:
        print("No clients found.")
        return

    print(f"{'ID':<6} {'Client':<28} {'Product':<22} {'Provider':<24} {'Policy No':<18} {'Invoice':>18}")
    print("-" * 120)
    for client in clients:
        print(
            f"{client.id or '-':<6} {client.client_name[:27]:<28} {client.product[:21]:<22} "
            f"{client.insurance_provider[:23]:<24} {(client.policy_no or '-')[:17]:<18} "
            f"{format_currency(client.total_invoice):>18}"
        )
    print(f"\n{len(clients)} client(s)")


def show_client(client: Client):
    print(f"{client.client_name} (id {client.id})")
    print(f"  Customer type:  {client.customer_type}")
    print(f"  Product:        {client.product} / {client.insurance_provider}")
    print(f"  Mobile:         {client.mobile_no}")
    print(f"  Email:          {client.email or '-'}")
    print(f"  Policy:         {client.policy_no or '-'} "
          f"({format_date(client.policy_period_from)} to {format_date(client.policy_period_to)})")
    print(f"  Sum insured:    {format_currency(client.sum_insured)}")
    print(f"  Total invoice:  {format_currency(client.total_invoice)}")

    print("\nDocuments:")
    for category in build_document_categories(client):
        print(f"  {category.name} ({category.uploaded}/{len(category.documents)})")
        for doc in category.documents:
            print(f"    [{'x' if doc.uploaded else ' '}] {doc.label:<24} {doc.url or ''}")


def check_document(path: str, client_id: str | None) -> int:
    resolver = get_document_resolver()

    result = resolver.try_access(path, client_id)
    print(f"Document: {path}")
    for attempt in result.attempts:
        outcome = "OK" if attempt.ok else (attempt.status_code or attempt.error or "failed")
        print(f"  {attempt.method:<18} {attempt.url}  -> {outcome}")

    if result.success:
        print(f"\nReachable via {result.method}: {result.url}")
    else:
        print("\n[WARNING] No access method succeeded.")

    diagnostics = resolver.diagnose(path, client_id)
    print("\nDiagnostics:")
    print(f"  With /uploads prefix: {diagnostics.with_uploads_prefix}")
    print(f"  Direct URL:           {diagnostics.direct_url}")
    print(f"  Parsed:               {diagnostics.parsed.model_dump() if diagnostics.parsed else None}")
    print(f"  API URL:              {diagnostics.api_url}")
    if diagnostics.file_check_error:
        print(f"  File check error:     {diagnostics.file_check_error}")
    else:
        print(f"  File check:           {diagnostics.file_check}")

    return 0 if result.success else 1


def repair_documents() -> int:
    result = get_document_resolver().repair_all()
    if not result.success:
        print(f"[ERROR] Document repair failed: {result.error}")
        return 1

    print("Document repair completed:")
    print(f"  Paths fixed:          {result.fixed_paths}")
    print(f"  Directories created:  {result.created_directories}")
    print(f"  Clients processed:    {result.clients_processed}")
    return 0


def seed_sample_clients() -> int:
    api = get_api_client()
    created = 0
    for client in sample_clients():
        client_id = api.create_client(client)
        print(f"  Created {client.client_name} (id {client_id})")
        created += 1
    print(f"\nCreated {created} sample client(s)")
    return 0


def create_user(name: str, email: str, role: str) -> int:
    password = getpass.getpass(f"Password for {email}: ")
    errors = validate_user_form({"name": name, "email": email, "role": role, "password": password})
    if errors:
        for field_name, message in errors.items():
            print(f"[ERROR] {field_name}: {message}")
        return 1

    try:
        account = get_user_store().create_user(name, email, role, password)
    except DuplicateUserError as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"Created {config.USER_ROLES[account.role]} account for {account.email}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not validate_environment():
        return 1

    try:
        # User management works without the backend
        if args.create_user:
            return create_user(*args.create_user)

        if args.list_clients:
            print_client_table(get_api_client().get_all_clients())
            return 0

        if args.search is not None:
            print_client_table(filter_clients(get_api_client().get_all_clients(), args.search))
            return 0

        if args.show_client:
            show_client(get_api_client().get_client_by_id(args.show_client))
            return 0

        if args.check_document:
            return check_document(args.check_document, args.client_id)

        if args.repair_documents:
            return repair_documents()

        if args.seed_sample_clients:
            return seed_sample_clients()

        if args.export_summary:
            client = get_api_client().get_client_by_id(args.export_summary)
            path = generate_client_summary(client, args.output_dir)
            print(f"Summary written to {path}")
            return 0

    except KeyboardInterrupt:
        print("\n\n[WARNING] Interrupted by user")
        return 130
    except ApiError as e:
        print(f"\n[ERROR] Backend rejected the request: {e}")
        return 1
    except httpx.HTTPError as e:
        print(f"\n[ERROR] Could not reach the backend at {config.API_URL}: {e}")
        return 1

    print("Nothing to do. Run with --help for available commands, or start the UI with:")
    print("  streamlit run frontend/app.py")
    return 0


if __name__ == "__main__":
    sys.exit(main())
