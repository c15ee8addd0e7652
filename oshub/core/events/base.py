"""Base class for all domain events.

Enforces that every event is a validated, frozen Pydantic model.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from oshub.core.events.enums import EventType


class DomainEvent(BaseModel):
    """Base for all domain events.

    Subclasses narrow event_type to a source-specific enum and add the
    snapshot fields they carry. ``event_id`` is the platform's delivery id,
    kept for log correlation across at-least-once redeliveries.
    """

    model_config = ConfigDict(frozen=True)

    event_type: EventType
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: Optional[str] = None
