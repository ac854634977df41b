"""
Message models for Pub/Sub pull delivery.
"""

from typing import Dict
from pydantic import BaseModel, Field


class PulledMessage(BaseModel):
    """One message instance returned by a pull.

    The ack_id is scoped to this delivery attempt; a redelivery of the same
    message carries a different ack_id.
    """

    ack_id: str
    message_id: str = ""
    data: bytes = b""
    attributes: Dict[str, str] = Field(default_factory=dict)

    @property
    def text(self) -> str:
        """UTF-8 view of data; undecodable bytes become U+FFFD."""
        return self.data.decode("utf-8", errors="replace")

    @classmethod
    def from_received(cls, received) -> "PulledMessage":
        """Build from a google.pubsub_v1.ReceivedMessage."""
        message = received.message
        return cls(
            ack_id=received.ack_id,
            message_id=message.message_id,
            data=bytes(message.data),
            attributes=dict(message.attributes),
        )
