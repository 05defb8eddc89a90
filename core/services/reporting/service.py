"""
Core Report Service

Provides centralized PDF report rendering on a ReportLab canvas.
"""

import logging
from io import BytesIO

from django.utils import timezone
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas as pdf_canvas

from core.services.exceptions import StreamWriteError
from .dto import PdfResult
from .registry import get_template, build_filename


logger = logging.getLogger(__name__)


class ReportService:
    """
    Core service for PDF report generation.

    This service provides:
    - PDF rendering using the ReportLab canvas
    - Template-based report generation via registry
    - A single generation instant shared by the document and its filename
    - All-or-nothing output: a failed render never yields partial bytes

    Each call allocates its own buffer and canvas, so concurrent renders
    share no state.
    """

    def render(self, report_key: str, context: dict) -> bytes:
        """
        Render a report to PDF bytes.

        Args:
            report_key: Report template identifier (e.g., 'credentials.v1')
            context: Dict with report data

        Returns:
            PDF content as bytes

        Raises:
            KeyError: If report_key is not registered
            StreamWriteError: If writing the PDF fails
        """
        return self.render_result(report_key, context).pdf_bytes

    def render_result(self, report_key: str, context: dict) -> PdfResult:
        """
        Render a report and wrap it with the metadata needed to serve it.

        A 'generated_at' datetime in the context is used as the generation
        instant; otherwise the current local time is used.
        """
        template = get_template(report_key)

        context = dict(context)
        if context.get('generated_at') is None:
            context['generated_at'] = timezone.localtime()

        logger.debug(f"Rendering report {report_key}")
        buffer = BytesIO()
        try:
            canvas = pdf_canvas.Canvas(buffer, pagesize=A4)
            summary = template.draw(canvas, context) or {}
            canvas.save()
            pdf_bytes = buffer.getvalue()
        except (OSError, MemoryError) as e:
            logger.error(
                f"Failed to write PDF for report {report_key}: {e}",
                exc_info=True
            )
            raise StreamWriteError(f"Failed to write PDF for report '{report_key}'") from e
        finally:
            buffer.close()

        result = PdfResult(
            pdf_bytes=pdf_bytes,
            filename=build_filename(report_key, context['generated_at']),
            page_count=summary.get('pages', 0),
            row_count=summary.get('rows', 0),
        )

        logger.info(
            f"Successfully generated PDF: {result.filename} "
            f"({len(result)} bytes, {result.page_count} pages, {result.row_count} rows)"
        )

        return result
