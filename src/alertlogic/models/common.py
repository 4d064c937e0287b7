"""Shapes shared across the Alert Logic services."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ModifiedCreated(BaseModel):
    """Timestamp and actor recorded for a create or modify event."""

    at: int | None = None
    by: str | None = None

    model_config = ConfigDict(extra="allow")


__all__ = ["ModifiedCreated"]
