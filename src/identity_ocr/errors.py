"""
Exceptions raised by the OCR client.
"""


class OCRError(RuntimeError):
    """Base class for identity OCR failures."""


class ConfigurationError(OCRError):
    """The completion backend handle is missing."""


class UpstreamCallError(OCRError):
    """The completion backend call itself failed."""


class EmptyChoicesError(OCRError):
    """The completion backend returned no choices."""


class EmptyContentError(OCRError):
    """The selected choice carried no text content."""


class MalformedResponseError(OCRError):
    """The reply could not be parsed into the expected JSON shape."""


class PublishError(OCRError):
    """Sending the analytics event failed. Never surfaced by scan calls."""
