# This project was developed with assistance from AI tools.
import io
import logging
import re
from datetime import datetime
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from config import config
from models import Client
from utils.documents import build_document_categories, count_documents
from utils.formatting import display, format_address, format_currency, format_date
from utils.portfolio import commission_total

logger = logging.getLogger(__name__)


def _get_styles():
    """Get configured paragraph styles for the summary."""
    styles = getSampleStyleSheet()

    styles.add(ParagraphStyle(
        name='CustomTitle',
        parent=styles['Heading1'],
        fontSize=22,
        spaceAfter=20,
        alignment=TA_CENTER,
        textColor=colors.HexColor('#9a3412')
    ))

    styles.add(ParagraphStyle(
        name='SectionHeader',
        parent=styles['Heading2'],
        fontSize=14,
        spaceBefore=16,
        spaceAfter=8,
        textColor=colors.HexColor('#c2410c')
    ))

    styles.add(ParagraphStyle(
        name='CustomBody',
        parent=styles['Normal'],
        fontSize=10,
        spaceBefore=4,
        spaceAfter=4
    ))

    styles.add(ParagraphStyle(
        name='SmallText',
        parent=styles['Normal'],
        fontSize=8,
        textColor=colors.gray
    ))

    return styles


def _field_table(rows: list[tuple[str, str]]) -> Table:
    """Two-column label/value table."""
    data = [[label, value] for label, value in rows]
    table = Table(data, colWidths=[2.2*inch, 4.3*inch])
    table.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('TEXTCOLOR', (0, 0), (0, -1), colors.HexColor('#4a5568')),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#e2e8f0')),
        ('ROWBACKGROUNDS', (0, 0), (-1, -1), [colors.white, colors.HexColor('#fff7ed')]),
    ]))
    return table


def _premium_table(client: Client) -> Table:
    """Premium breakdown with the invoice total as the last row."""
    money = format_currency
    data = [
        ['Component', 'Amount'],
        ['Basic Premium', money(client.basic_premium)],
        ['SRCC Premium', money(client.srcc_premium)],
        ['TC Premium', money(client.tc_premium)],
        ['Net Premium', money(client.net_premium)],
        ['Stamp Duty', money(client.stamp_duty)],
        ['Admin Fees', money(client.admin_fees)],
        ['Road Safety Fee', money(client.road_safety_fee)],
        ['Policy Fee', money(client.policy_fee)],
        ['VAT', money(client.vat_fee)],
        ['TOTAL INVOICE', money(client.total_invoice)],
    ]

    table = Table(data, colWidths=[3*inch, 2.5*inch])
    table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#c2410c')),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 8),
        ('BACKGROUND', (0, -1), (-1, -1), colors.HexColor('#fed7aa')),
        ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#e2e8f0')),
    ]))
    return table


def _document_checklist(client: Client) -> Table:
    """Uploaded / missing status for every document slot."""
    data = [['Category', 'Document', 'Status']]
    for category in build_document_categories(client):
        for doc in category.documents:
            data.append([
                category.name,
                doc.label,
                doc.file_name if doc.uploaded else 'Missing',
            ])

    table = Table(data, colWidths=[1.8*inch, 1.8*inch, 2.9*inch])
    style = [
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#4a5568')),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 8),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#cbd5e0')),
    ]
    for row_index, row in enumerate(data[1:], start=1):
        if row[2] == 'Missing':
            style.append(('TEXTCOLOR', (2, row_index), (2, row_index), colors.HexColor('#b91c1c')))
    table.setStyle(TableStyle(style))
    return table


def _build_elements(client: Client) -> list:
    styles = _get_styles()

    elements = []
    elements.append(Paragraph("Client Policy Summary", styles['CustomTitle']))
    elements.append(Paragraph(
        f"Generated: {datetime.now().strftime('%B %d, %Y at %H:%M')}",
        styles['SmallText']
    ))
    elements.append(Spacer(1, 16))

    elements.append(Paragraph("Client Details", styles['SectionHeader']))
    elements.append(_field_table([
        ("Client Name", display(client.client_name)),
        ("Customer Type", display(client.customer_type)),
        ("Introducer Code", display(client.introducer_code)),
        ("Product", display(client.product)),
        ("Insurance Provider", display(client.insurance_provider)),
        ("Branch", display(client.branch)),
        ("Mobile", display(client.mobile_no)),
        ("Telephone", display(client.telephone)),
        ("Email", display(client.email)),
        ("Contact Person", display(client.contact_person)),
        ("Address", format_address(client)),
    ]))

    elements.append(Paragraph("Policy", styles['SectionHeader']))
    elements.append(_field_table([
        ("Policy Type", display(client.policy_type)),
        ("Policy", display(client.policy_)),
        ("Policy No", display(client.policy_no)),
        ("Policy Period", f"{format_date(client.policy_period_from)} to {format_date(client.policy_period_to)}"),
        ("Coverage", display(client.coverage)),
        ("Sum Insured", format_currency(client.sum_insured)),
        ("Debit Note", display(client.debit_note)),
    ]))

    elements.append(Paragraph("Premium Breakdown", styles['SectionHeader']))
    elements.append(_premium_table(client))

    elements.append(Paragraph("Commission", styles['SectionHeader']))
    elements.append(_field_table([
        ("Commission Type", display(client.commission_type)),
        ("Basic", format_currency(client.commission_basic)),
        ("SRCC", format_currency(client.commission_srcc)),
        ("TC", format_currency(client.commission_tc)),
        ("Total Commission", format_currency(commission_total(client))),
    ]))

    categories = build_document_categories(client)
    elements.append(Paragraph("Documents", styles['SectionHeader']))
    elements.append(Paragraph(
        f"<b>{count_documents(categories)}</b> of "
        f"{sum(len(c.documents) for c in categories)} documents on file.",
        styles['CustomBody']
    ))
    elements.append(_document_checklist(client))

    return elements


def _build_pdf(client: Client, target) -> None:
    doc = SimpleDocTemplate(
        target,
        pagesize=A4,
        rightMargin=54,
        leftMargin=54,
        topMargin=54,
        bottomMargin=54,
        title=f"Client Summary - {client.client_name}",
    )
    doc.build(_build_elements(client))


def render_client_summary(client: Client) -> bytes:
    """Render the client summary PDF in memory (for download buttons)."""
    buffer = io.BytesIO()
    _build_pdf(client, buffer)
    return buffer.getvalue()


def summary_filename(client: Client) -> str:
    """File name for a client's summary, e.g. client_12_john_fernando.pdf."""
    slug = re.sub(r"[^a-z0-9]+", "_", client.client_name.lower()).strip("_") or "client"
    return f"client_{client.id or 'new'}_{slug}.pdf"


def generate_client_summary(client: Client, output_path: Path | None = None) -> str:
    """
    Write a client policy summary PDF.

    Args:
        client: The client record
        output_path: Directory to save the summary (defaults to config)

    Returns:
        Path to the generated file
    """
    output_dir = Path(output_path or config.OUTPUT_REPORT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)

    summary_path = output_dir / summary_filename(client)
    _build_pdf(client, str(summary_path))

    logger.info(f"Client summary written: {summary_path}")
    return str(summary_path)
