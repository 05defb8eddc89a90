"""
Reports package

Contains report templates for PDF generation.
"""

from core.services.reporting.registry import register_template, is_registered
from .templates.credentials_v1 import CredentialsReportV1


CREDENTIALS_REPORT_KEY = 'credentials.v1'


def register_all_templates():
    """Register all available report templates"""
    if not is_registered(CREDENTIALS_REPORT_KEY):
        register_template(
            CREDENTIALS_REPORT_KEY,
            CredentialsReportV1,
            filename_prefix='student_credentials',
        )


# Auto-register templates when module is imported
register_all_templates()
