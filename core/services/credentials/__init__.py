"""
Student credentials

Credential record normalisation and bulk student provisioning.
"""

from .records import CredentialRecord, normalize_records
from .provisioning import BulkResult, add_students_bulk, generate_temporary_password

__all__ = [
    'CredentialRecord',
    'normalize_records',
    'BulkResult',
    'add_students_bulk',
    'generate_temporary_password',
]
