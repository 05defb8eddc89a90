"""
Data Transfer Objects for report rendering
"""

from dataclasses import dataclass


@dataclass
class PdfResult:
    """
    Result of a report rendering operation.

    Contains the PDF bytes and metadata for HTTP responses.
    """

    pdf_bytes: bytes
    filename: str
    content_type: str = "application/pdf"
    page_count: int = 0
    row_count: int = 0

    def __len__(self) -> int:
        """Return the size of PDF in bytes"""
        return len(self.pdf_bytes)

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'
