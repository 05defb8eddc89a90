"""
Bulk student provisioning

Creates student accounts for an organization in one request and hands back
the temporary credentials so they can be distributed (usually as the
credentials PDF).
"""

import logging
from dataclasses import dataclass, field

from django.conf import settings
from django.db import transaction, IntegrityError
from django.db.models import Q
from django.utils.crypto import get_random_string

from core.models import User, UserRole, OrganizationStudent
from core.services.exceptions import BulkProvisioningError
from .records import CredentialRecord

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_SUFFIX = '@CN'
RANDOM_PASSWORD_LENGTH = 8


def generate_temporary_password(roll_number=None):
    """
    Temporary password for a new student.

    Follows the '{RollNumber}@CN' convention when a roll number is known,
    otherwise returns a random alphanumeric string.
    """
    roll_number = (roll_number or '').strip()
    if roll_number:
        suffix = getattr(settings, 'STUDENT_PASSWORD_SUFFIX', DEFAULT_PASSWORD_SUFFIX)
        return f"{roll_number}{suffix}"
    return get_random_string(RANDOM_PASSWORD_LENGTH)


def _clean(value):
    if value is None:
        return ''
    return str(value).strip()


@dataclass
class BulkResult:
    successful: list = field(default_factory=list)
    failed: list = field(default_factory=list)

    @property
    def message(self):
        return f"Bulk upload completed: {len(self.successful)} successful, {len(self.failed)} failed"

    def as_dict(self):
        return {'successful': self.successful, 'failed': self.failed}

    def as_credentials(self):
        """Credential records for every student that was created."""
        return [
            CredentialRecord(
                name=entry['name'],
                email=entry['email'],
                roll_number=entry['rollNumber'],
                password=entry['temporaryPassword'],
                course=entry['course'],
                year=entry['year'],
            )
            for entry in self.successful
        ]


def _find_existing(username, email, roll_number):
    query = Q(username=username) | Q(email__iexact=email)
    if roll_number:
        query |= Q(roll_number=roll_number)
    return User.objects.filter(query).exists()


def add_students_bulk(organization, students):
    """
    Create student accounts linked to an organization.

    Each entry is processed independently; one failing entry never prevents
    the others from being created.

    Args:
        organization: User with the organization role
        students: List of dicts with name, email, rollNumber/roll_number,
                  course, year and optionally username

    Returns:
        BulkResult with 'successful' and 'failed' entries

    Raises:
        BulkProvisioningError: If students is not a non-empty list
    """
    if not isinstance(students, list) or not students:
        raise BulkProvisioningError("Students array is required and must not be empty")

    result = BulkResult()

    for student_data in students:
        if not isinstance(student_data, dict):
            result.failed.append({'data': student_data, 'reason': 'Invalid student entry'})
            continue

        email = _clean(student_data.get('email'))
        name = _clean(student_data.get('name'))
        roll_number = _clean(student_data.get('rollNumber')) or _clean(student_data.get('roll_number'))
        course = _clean(student_data.get('course'))
        year = _clean(student_data.get('year'))

        if not email:
            result.failed.append({**student_data, 'reason': 'Email is required'})
            continue

        username = _clean(student_data.get('username')) or roll_number or email.split('@')[0]

        if _find_existing(username, email, roll_number):
            result.failed.append({**student_data, 'reason': 'Already exists'})
            continue

        temporary_password = generate_temporary_password(roll_number)
        try:
            with transaction.atomic():
                student = User.objects.create_user(
                    username=username,
                    email=email,
                    password=temporary_password,
                    name=name,
                    role=UserRole.STUDENT,
                    roll_number=roll_number or None,
                    course=course,
                    year=year,
                )
                OrganizationStudent.objects.create(
                    organization=organization,
                    student=student,
                    roll_number=roll_number,
                    course=course,
                    year=year,
                )
        except IntegrityError as e:
            logger.warning(f"Could not create student {username}: {e}")
            result.failed.append({**student_data, 'reason': 'Already exists'})
            continue

        result.successful.append({
            'id': student.id,
            'username': student.username,
            'email': student.email,
            'name': student.name,
            'rollNumber': roll_number,
            'course': course,
            'year': year,
            'temporaryPassword': temporary_password,
        })

    logger.info(f"{result.message} for organization {organization.username}")
    return result
