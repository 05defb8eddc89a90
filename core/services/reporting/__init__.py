"""
Core Report Service

Provides generic canvas-based PDF report rendering.
"""

from .service import ReportService
from .dto import PdfResult

__all__ = ['ReportService', 'PdfResult']
