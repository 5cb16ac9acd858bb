"""Kubernetes cluster-level resource views: nodes and events."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import Field, computed_field

from kubeai_doctor.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _get_timestamp,
    _metadata_fields,
    _safe_get,
)

NO_MESSAGE = "No message"


def is_node_ready(conditions: Iterable[Any] | None) -> bool:
    """Return True iff a ``Ready`` condition with status ``True`` is present."""
    return any(
        getattr(cond, "type", None) == "Ready" and getattr(cond, "status", None) == "True"
        for cond in conditions or []
    )


class NodeSummary(K8sEntityBase):
    """Node view with its readiness classification."""

    status: str = Field(default="Unknown", description="Ready, NotReady or Unknown")
    ready: bool = Field(default=False, description="Whether the node reports Ready=True")
    roles: list[str] = Field(default_factory=list, description="Node roles")
    version: str | None = Field(default=None, description="Kubelet version")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def healthy(self) -> bool:
        """Whether this item counts towards the healthy total."""
        return self.ready

    @classmethod
    def from_k8s_object(cls, obj: Any) -> NodeSummary:
        """Create from a kubernetes V1Node object.

        A node without a status block, or without a Ready condition, is
        reported with status ``Unknown`` and classified not ready.
        """
        labels = _safe_get(obj, "metadata", "labels") or {}
        roles = [
            key.split("/", 1)[1]
            for key in labels
            if key.startswith("node-role.kubernetes.io/") and key.split("/", 1)[1]
        ]

        conditions = _safe_get(obj, "status", "conditions") or []
        ready = is_node_ready(conditions)
        status = "Unknown"
        if ready:
            status = "Ready"
        elif any(getattr(cond, "type", None) == "Ready" for cond in conditions):
            status = "NotReady"

        return cls(
            **_metadata_fields(obj),
            status=status,
            ready=ready,
            roles=roles or ["<none>"],
            version=_safe_get(obj, "status", "node_info", "kubelet_version"),
        )


class EventSummary(K8sEntityBase):
    """Event view."""

    type: str = Field(default="Normal", description="Event type (Normal/Warning)")
    reason: str | None = Field(default=None, description="Event reason")
    message: str = Field(default=NO_MESSAGE, description="Event message")
    count: int = Field(default=1, description="Occurrence count")
    last_timestamp: str | None = Field(default=None, description="Last occurrence")
    involved_object_kind: str | None = Field(default=None, description="Involved object kind")
    involved_object_name: str | None = Field(default=None, description="Involved object name")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> EventSummary:
        """Create from a kubernetes CoreV1Event object."""
        involved = getattr(obj, "involved_object", None)

        return cls(
            **_metadata_fields(obj),
            type=getattr(obj, "type", None) or "Normal",
            reason=getattr(obj, "reason", None),
            message=getattr(obj, "message", None) or NO_MESSAGE,
            count=getattr(obj, "count", None) or 1,
            last_timestamp=_get_timestamp(getattr(obj, "last_timestamp", None)),
            involved_object_kind=_safe_get(involved, "kind"),
            involved_object_name=_safe_get(involved, "name"),
        )
