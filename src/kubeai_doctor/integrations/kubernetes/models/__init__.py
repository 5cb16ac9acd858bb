"""Kubernetes resource views and health report models."""

from kubeai_doctor.integrations.kubernetes.models.base import K8sEntityBase
from kubeai_doctor.integrations.kubernetes.models.cluster import (
    NO_MESSAGE,
    EventSummary,
    NodeSummary,
    is_node_ready,
)
from kubeai_doctor.integrations.kubernetes.models.health import (
    CheckResult,
    HealthSummary,
    ResourceKind,
)
from kubeai_doctor.integrations.kubernetes.models.networking import ServiceSummary
from kubeai_doctor.integrations.kubernetes.models.workloads import (
    RUNNING_PHASE,
    UNKNOWN_PHASE,
    PodSummary,
)

__all__ = [
    "NO_MESSAGE",
    "RUNNING_PHASE",
    "UNKNOWN_PHASE",
    "CheckResult",
    "EventSummary",
    "HealthSummary",
    "K8sEntityBase",
    "NodeSummary",
    "PodSummary",
    "ResourceKind",
    "ServiceSummary",
    "is_node_ready",
]
