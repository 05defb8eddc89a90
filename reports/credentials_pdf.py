"""
Student Credentials PDF Module

Entry points for turning bulk student credentials into a confidential,
paginated PDF ready to be served or written to storage.
"""

from core.services.reporting import ReportService
from reports import CREDENTIALS_REPORT_KEY


def build_credentials_pdf_result(credentials, organization_name=None, generated_at=None):
    """
    Render credentials and return the PDF with its download metadata.

    Args:
        credentials: Sequence of credential dicts or CredentialRecord objects
        organization_name: Name printed in the header; a placeholder is used when empty
        generated_at: Optional generation instant (defaults to now, local time)

    Returns:
        PdfResult with bytes, filename, page and row counts

    Raises:
        StreamWriteError: If the PDF could not be written
    """
    context = {
        'credentials': list(credentials or []),
        'organization_name': organization_name,
        'generated_at': generated_at,
    }
    return ReportService().render_result(CREDENTIALS_REPORT_KEY, context)


def create_bulk_credentials_pdf(credentials, organization_name=None):
    """
    Build the credentials PDF and return its bytes.

    Raises:
        StreamWriteError: If the PDF could not be written
    """
    return build_credentials_pdf_result(credentials, organization_name).pdf_bytes
