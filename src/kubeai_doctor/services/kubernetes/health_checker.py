"""Cluster health checks for nodes, pods, services, and events.

Each check performs a single list call against the core API, builds
read-only views of the returned items, and classifies nodes and pods.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kubeai_doctor.integrations.kubernetes.models import (
    CheckResult,
    EventSummary,
    HealthSummary,
    NodeSummary,
    PodSummary,
    ResourceKind,
    ServiceSummary,
)
from kubeai_doctor.services.kubernetes.base import K8sBaseManager


class ClusterHealthChecker(K8sBaseManager):
    """Runs read-only health checks against the cluster.

    A namespace of ``None`` means all namespaces.
    """

    _entity_name = "health_check"

    def run(self, kind: ResourceKind, namespace: str | None = None) -> CheckResult:
        """Run the check for ``kind``.

        Args:
            kind: Resource collection to check.
            namespace: Namespace filter; ignored for nodes.

        Returns:
            The check result.
        """
        if kind is ResourceKind.NODES:
            return self.check_nodes()
        if kind is ResourceKind.PODS:
            return self.check_pods(namespace)
        if kind is ResourceKind.SERVICES:
            return self.check_services(namespace)
        if kind is ResourceKind.EVENTS:
            return self.check_events(namespace)
        raise ValueError(f"Unsupported resource kind: {kind!r}")

    # =========================================================================
    # Checks
    # =========================================================================

    def check_nodes(self) -> CheckResult:
        """List all nodes and classify them by their Ready condition."""
        self._log.debug("listing_nodes")
        try:
            result = self._client.core_v1.list_node(**self._client.request_kwargs())
        except Exception as e:
            self._handle_api_error(e, "Node")

        items = [NodeSummary.from_k8s_object(node) for node in result.items or []]
        summary = HealthSummary.from_items(items)
        self._log.debug(
            "listed_nodes",
            count=len(items),
            healthy=summary.healthy,
            unhealthy=summary.unhealthy,
        )
        return CheckResult(kind=ResourceKind.NODES, items=items, summary=summary)

    def check_pods(self, namespace: str | None = None) -> CheckResult:
        """List pods and classify them by phase.

        Args:
            namespace: Namespace filter, or None for all namespaces.
        """
        items = [
            PodSummary.from_k8s_object(pod)
            for pod in self._list(
                "Pod",
                namespace,
                self._client.core_v1.list_namespaced_pod,
                self._client.core_v1.list_pod_for_all_namespaces,
            )
        ]
        summary = HealthSummary.from_items(items)
        self._log.debug(
            "listed_pods",
            count=len(items),
            healthy=summary.healthy,
            unhealthy=summary.unhealthy,
        )
        return CheckResult(
            kind=ResourceKind.PODS, namespace=namespace, items=items, summary=summary
        )

    def check_services(self, namespace: str | None = None) -> CheckResult:
        """List services without classification.

        Args:
            namespace: Namespace filter, or None for all namespaces.
        """
        items = [
            ServiceSummary.from_k8s_object(svc)
            for svc in self._list(
                "Service",
                namespace,
                self._client.core_v1.list_namespaced_service,
                self._client.core_v1.list_service_for_all_namespaces,
            )
        ]
        self._log.debug("listed_services", count=len(items))
        return CheckResult(kind=ResourceKind.SERVICES, namespace=namespace, items=items)

    def check_events(self, namespace: str | None = None) -> CheckResult:
        """List events without classification.

        Args:
            namespace: Namespace filter, or None for all namespaces.
        """
        items = [
            EventSummary.from_k8s_object(evt)
            for evt in self._list(
                "Event",
                namespace,
                self._client.core_v1.list_namespaced_event,
                self._client.core_v1.list_event_for_all_namespaces,
            )
        ]
        self._log.debug("listed_events", count=len(items))
        return CheckResult(kind=ResourceKind.EVENTS, namespace=namespace, items=items)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _list(
        self,
        resource_type: str,
        namespace: str | None,
        list_namespaced: Callable[..., Any],
        list_all: Callable[..., Any],
    ) -> list[Any]:
        """Issue one list call, namespaced when a namespace is given."""
        self._log.debug(f"listing_{resource_type.lower()}s", namespace=namespace or "<all>")
        kwargs = self._client.request_kwargs()
        try:
            if namespace:
                result = list_namespaced(namespace=namespace, **kwargs)
            else:
                result = list_all(**kwargs)
        except Exception as e:
            self._handle_api_error(e, resource_type, namespace)
        return list(result.items or [])
