"""
Report Template Registry

Central registry for resolving report keys to template implementations and
the download filename used when the rendered PDF is served.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, Callable, Any


class ReportTemplate(Protocol):
    """Protocol defining the interface for report templates"""

    def draw(self, canvas: Any, context: dict) -> dict:
        """
        Draw the complete report onto a fresh canvas.

        Returns a summary of what was laid out (e.g. page and row counts).
        """
        ...


@dataclass(frozen=True)
class RegisteredTemplate:
    factory: Callable[[], ReportTemplate]
    filename_prefix: str


class ReportRegistry:
    """Registry for report templates"""

    def __init__(self):
        self._entries: dict[str, RegisteredTemplate] = {}

    def register(
        self,
        report_key: str,
        template_factory: Callable[[], ReportTemplate],
        *,
        filename_prefix: str = 'report',
    ) -> None:
        """
        Register a report template.

        Args:
            report_key: Unique identifier for the report type (e.g., 'credentials.v1')
            template_factory: Factory returning a new template instance per render
            filename_prefix: Prefix of the suggested download filename

        Raises:
            ValueError: If the key is already registered
        """
        if report_key in self._entries:
            raise ValueError(f"Report template '{report_key}' is already registered")
        self._entries[report_key] = RegisteredTemplate(template_factory, filename_prefix)

    def _entry(self, report_key: str) -> RegisteredTemplate:
        try:
            return self._entries[report_key]
        except KeyError:
            raise KeyError(f"Report template '{report_key}' not found") from None

    def get_template(self, report_key: str) -> ReportTemplate:
        """
        Get a fresh template instance by its key.

        Raises:
            KeyError: If the report key is not registered
        """
        return self._entry(report_key).factory()

    def build_filename(self, report_key: str, generated_at: datetime) -> str:
        """Suggested download filename, e.g. 'student_credentials_20240101_120000.pdf'."""
        prefix = self._entry(report_key).filename_prefix
        return f"{prefix}_{generated_at.strftime('%Y%m%d_%H%M%S')}.pdf"

    def is_registered(self, report_key: str) -> bool:
        """Check if a report key is registered"""
        return report_key in self._entries

    def list_templates(self) -> list[str]:
        """List all registered report keys"""
        return list(self._entries.keys())


# Global registry instance
_registry = ReportRegistry()


def register_template(report_key: str, template_factory: Callable[[], ReportTemplate], **options) -> None:
    """Register a report template in the global registry"""
    _registry.register(report_key, template_factory, **options)


def get_template(report_key: str) -> ReportTemplate:
    """Get a report template from the global registry"""
    return _registry.get_template(report_key)


def build_filename(report_key: str, generated_at: datetime) -> str:
    """Get the download filename for a report from the global registry"""
    return _registry.build_filename(report_key, generated_at)


def is_registered(report_key: str) -> bool:
    """Check if a report key is registered"""
    return _registry.is_registered(report_key)


def list_templates() -> list[str]:
    """List all registered report keys"""
    return _registry.list_templates()
