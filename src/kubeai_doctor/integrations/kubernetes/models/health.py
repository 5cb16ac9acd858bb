"""Health check report models."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, computed_field

from kubeai_doctor.integrations.kubernetes.exceptions import InvalidResourceKindError
from kubeai_doctor.integrations.kubernetes.models.base import K8sEntityBase


class ResourceKind(StrEnum):
    """Resource collections that can be checked."""

    NODES = "nodes"
    PODS = "pods"
    SERVICES = "services"
    EVENTS = "events"

    @classmethod
    def parse(cls, value: str) -> ResourceKind:
        """Build a kind from a CLI argument.

        Raises:
            InvalidResourceKindError: If ``value`` names no supported kind.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidResourceKindError(value) from None

    @property
    def label(self) -> str:
        """Singular display label, e.g. ``Node``."""
        return self.value[:-1].capitalize()

    @property
    def namespaced(self) -> bool:
        """Nodes are cluster-scoped; everything else honours --namespace."""
        return self is not ResourceKind.NODES


class HealthSummary(BaseModel):
    """Healthy/unhealthy counts for a classified check."""

    model_config = ConfigDict(frozen=True)

    healthy: int = Field(default=0, ge=0)
    unhealthy: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.healthy + self.unhealthy

    @classmethod
    def from_items(cls, items: Sequence[Any]) -> HealthSummary:
        """Count items by their ``healthy`` flag."""
        healthy = sum(1 for item in items if item.healthy)
        return cls(healthy=healthy, unhealthy=len(items) - healthy)


class CheckResult(BaseModel):
    """Outcome of one check routine."""

    kind: ResourceKind
    namespace: str | None = Field(default=None, description="None means all namespaces")
    items: list[SerializeAsAny[K8sEntityBase]] = Field(default_factory=list)
    summary: HealthSummary | None = None
