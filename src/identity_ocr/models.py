"""
Record types exchanged with the vision model and the message queue.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Set

from pydantic import BaseModel, ConfigDict


class ProfessionType(str, Enum):
    """Credential holder category; selects the extraction prompt."""
    APEN = "apen"
    NURSE = "nurse"
    PHARMACIST = "phar"


class MessageType(str, Enum):
    IDENTIFY_OCR = "identify_ocr"


class Topic(str, Enum):
    """Publish destination, scoped by environment."""
    DEV = "wanderer-dev"
    PROD = "wanderer-prod"


class RawIdentityInfo(BaseModel):
    """
    Every field a profession prompt can ask for.

    Fields the model does not return stay None and serialize as null.
    identify_url is set by the client to the scanned image location.
    """
    model_config = ConfigDict(extra="ignore")

    identify_url: Optional[str] = None
    name: Optional[str] = None
    birthday: Optional[str] = None  # YYYY-MM-DD
    position: Optional[str] = None  # PGY, Resident or VS
    department: Optional[str] = None
    facility: Optional[str] = None
    valid_date: Optional[str] = None  # YYYY-MM-DD
    specialty_valid_date: Optional[str] = None  # YYYY-MM-DD

    def returned_fields(self) -> Set[str]:
        """Keys the model actually sent back, including explicit nulls."""
        return set(self.model_fields_set) - {"identify_url"}


class IdentityInfo(BaseModel):
    name: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    facility: Optional[str] = None


class NameResult(BaseModel):
    """Reply shape for the name-only prompt."""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None


class EventMessage(BaseModel):
    """Analytics event published after a successful scan."""
    user_id: str
    payload: RawIdentityInfo
    created_at: datetime
    type: MessageType
    source: str

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
