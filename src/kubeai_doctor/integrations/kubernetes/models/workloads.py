"""Kubernetes workload resource views."""

from __future__ import annotations

from typing import Any

from pydantic import Field, computed_field

from kubeai_doctor.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _metadata_fields,
    _safe_get,
)

RUNNING_PHASE = "Running"
UNKNOWN_PHASE = "Unknown"


class PodSummary(K8sEntityBase):
    """Pod view classified by lifecycle phase."""

    phase: str = Field(default=UNKNOWN_PHASE, description="Pod phase")
    node_name: str | None = Field(default=None, description="Node the pod is scheduled on")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def healthy(self) -> bool:
        """Whether this item counts towards the healthy total."""
        return self.phase == RUNNING_PHASE

    @classmethod
    def from_k8s_object(cls, obj: Any) -> PodSummary:
        """Create from a kubernetes V1Pod object.

        A missing status block or phase yields phase ``Unknown``.
        """
        return cls(
            **_metadata_fields(obj),
            phase=_safe_get(obj, "status", "phase", default=UNKNOWN_PHASE),
            node_name=_safe_get(obj, "spec", "node_name"),
        )
