"""
Identity OCR - Credential Image Field Extraction

Extracts name, birthday, position, department, facility and certificate dates
from medical staff credential images using vision models, and publishes each
result to a message topic for analytics.
"""

from .config import OCRConfig, default_config, load_config
from .errors import (
    ConfigurationError,
    EmptyChoicesError,
    EmptyContentError,
    MalformedResponseError,
    OCRError,
    PublishError,
    UpstreamCallError,
)
from .models import (
    EventMessage,
    IdentityInfo,
    MessageType,
    ProfessionType,
    RawIdentityInfo,
    Topic,
)
from .ocr_client import OCR, OCRClient, create_ocr_client
from .prompts import get_info_prompt
from .publisher import MessagePublisher

__version__ = "0.1.0"

__all__ = [
    "OCR",
    "OCRClient",
    "OCRConfig",
    "create_ocr_client",
    "default_config",
    "load_config",
    "get_info_prompt",
    "MessagePublisher",
    "EventMessage",
    "IdentityInfo",
    "MessageType",
    "ProfessionType",
    "RawIdentityInfo",
    "Topic",
    "OCRError",
    "ConfigurationError",
    "UpstreamCallError",
    "EmptyChoicesError",
    "EmptyContentError",
    "MalformedResponseError",
    "PublishError",
]
