"""
Message queue seam used to publish scan events.
"""

from typing import Optional, Protocol, runtime_checkable

from .models import EventMessage


@runtime_checkable
class MessagePublisher(Protocol):
    """
    Transport that delivers an event to a topic.

    Implementations signal failure by raising; PublishError is the
    conventional exception type.
    """

    def send(self, topic: str, message: EventMessage, timeout: Optional[float] = None) -> None:
        ...
