"""
Credential records

Normalises loosely-shaped credential dicts (as posted by the dashboard or
produced by bulk provisioning) into records that render safely.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union


def _text(value: Any) -> str:
    """Render a field value as text; None becomes an empty string."""
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class CredentialRecord:
    """A single student's identity and temporary login fields."""

    name: str = ''
    email: str = ''
    roll_number: str = ''
    password: str = ''
    course: str = ''
    year: str = ''

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'CredentialRecord':
        """
        Build a record from a mapping.

        The roll number may arrive as 'rollNumber' or 'roll_number'; the
        first non-empty one wins. Missing keys and None values become ''.
        """
        roll_number = _text(data.get('rollNumber')) or _text(data.get('roll_number'))
        return cls(
            name=_text(data.get('name')),
            email=_text(data.get('email')),
            roll_number=roll_number,
            password=_text(data.get('password')),
            course=_text(data.get('course')),
            year=_text(data.get('year')),
        )

    def as_row(self, index: int) -> list[str]:
        """Table cells for this record; index is the 1-based row number."""
        return [
            str(index),
            self.name,
            self.email,
            self.roll_number,
            self.password,
            self.course,
            self.year,
        ]


def normalize_records(records: Iterable[Union[CredentialRecord, Mapping[str, Any]]]) -> list[CredentialRecord]:
    """Coerce a sequence of dicts and/or records into CredentialRecords, keeping order."""
    normalized = []
    for record in records or ():
        if isinstance(record, CredentialRecord):
            normalized.append(record)
        elif isinstance(record, Mapping):
            normalized.append(CredentialRecord.from_dict(record))
        else:
            raise TypeError(
                f"Credential records must be mappings or CredentialRecord, got {type(record).__name__}"
            )
    return normalized
