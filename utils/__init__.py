# This project was developed with assistance from AI tools.
from .api_client import ApiError, BrokerageClient, get_api_client
from .documents import DocumentResolver, build_document_categories, get_document_resolver, parse_document_url
from .report_generator import generate_client_summary, render_client_summary
from .user_store import DuplicateUserError, UserStore, get_user_store

__all__ = [
    "ApiError",
    "BrokerageClient",
    "get_api_client",
    "DocumentResolver",
    "build_document_categories",
    "get_document_resolver",
    "parse_document_url",
    "generate_client_summary",
    "render_client_summary",
    "DuplicateUserError",
    "UserStore",
    "get_user_store",
]
