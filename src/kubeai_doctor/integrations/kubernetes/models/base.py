"""Base models for Kubernetes resource views."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class K8sEntityBase(BaseModel):
    """Base class for all read-only Kubernetes views."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(description="Resource name")
    namespace: str | None = Field(default=None, description="Resource namespace")
    creation_timestamp: str | None = Field(default=None, description="Creation time")

    @property
    def age(self) -> str:
        """Human-readable age string."""
        if not self.creation_timestamp:
            return "Unknown"
        try:
            created = datetime.fromisoformat(self.creation_timestamp.replace("Z", "+00:00"))
            delta = datetime.now(UTC) - created
            days = delta.days
            hours, remainder = divmod(delta.seconds, 3600)
            minutes = remainder // 60
            if days > 0:
                return f"{days}d"
            if hours > 0:
                return f"{hours}h"
            return f"{minutes}m"
        except (ValueError, TypeError):
            return "Unknown"


def _safe_get(obj: Any, *attrs: str, default: Any = None) -> Any:
    """Safely traverse nested attributes on kubernetes SDK objects."""
    current = obj
    for attr in attrs:
        if current is None:
            return default
        current = getattr(current, attr, None)
    return current if current is not None else default


def _get_timestamp(obj: Any) -> str | None:
    """Extract ISO timestamp string from a datetime or string."""
    if obj is None:
        return None
    if isinstance(obj, str):
        return obj
    if isinstance(obj, datetime):
        return obj.isoformat()
    return str(obj)


def _metadata_fields(obj: Any) -> dict[str, Any]:
    """Common metadata fields shared by every view."""
    return {
        "name": _safe_get(obj, "metadata", "name", default=""),
        "namespace": _safe_get(obj, "metadata", "namespace"),
        "creation_timestamp": _get_timestamp(_safe_get(obj, "metadata", "creation_timestamp")),
    }
