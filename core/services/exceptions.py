"""
Service-layer exceptions for consistent error handling across Career Nest.

Views catch these and translate them into HTTP responses; everything else
propagates unchanged.
"""


class ServiceError(Exception):
    """Base exception for all service-related errors."""
    pass


class StreamWriteError(ServiceError):
    """
    Raised when the PDF writing primitive fails while a report is rendered.

    The original low-level exception is always chained as ``__cause__``.
    No partial document is returned when this is raised.
    """
    pass


class BulkProvisioningError(ServiceError):
    """
    Raised when a bulk student request cannot be processed at all.

    Example:
        The ``students`` payload is missing, not a list, or empty.
    """
    pass
