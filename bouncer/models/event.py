"""Issue timeline event (assigned, unassigned, labeled, ...)."""

from datetime import datetime

from pydantic import BaseModel


class IssueEvent(BaseModel):
    """Issue event as returned by the events API."""

    id: int
    event: str
    created_at: datetime | None = None
