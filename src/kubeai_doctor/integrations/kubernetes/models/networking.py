"""Kubernetes networking resource views."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from kubeai_doctor.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _metadata_fields,
    _safe_get,
)


class ServiceSummary(K8sEntityBase):
    """Service view. Services carry no health classification."""

    type: str = Field(default="ClusterIP", description="Service type")
    cluster_ip: str | None = Field(default=None, description="Cluster IP")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ServiceSummary:
        """Create from a kubernetes V1Service object."""
        return cls(
            **_metadata_fields(obj),
            type=_safe_get(obj, "spec", "type", default="ClusterIP"),
            cluster_ip=_safe_get(obj, "spec", "cluster_ip"),
        )
