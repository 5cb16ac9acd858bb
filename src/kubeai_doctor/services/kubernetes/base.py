"""Base manager for Kubernetes service managers.

Provides shared infrastructure for resource managers: client access,
structured logging, and error translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import structlog

if TYPE_CHECKING:
    from kubeai_doctor.integrations.kubernetes.client import KubernetesClient

logger = structlog.get_logger()


class K8sBaseManager:
    """Base class for Kubernetes service managers.

    Subclasses set ``_entity_name`` for structured log context.

    Example:
        >>> class ClusterHealthChecker(K8sBaseManager):
        ...     _entity_name = "health_check"
    """

    _entity_name: str = ""

    def __init__(self, client: KubernetesClient) -> None:
        """Initialize the manager.

        Args:
            client: Kubernetes API client instance.
        """
        self._client = client
        self._log = logger.bind(entity=self._entity_name)

    def _handle_api_error(
        self,
        e: Exception,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> NoReturn:
        """Translate a Kubernetes API exception and re-raise.

        Args:
            e: The original exception (typically ApiException).
            resource_type: Type of resource being listed.
            namespace: Namespace the request was scoped to.

        Raises:
            KubernetesError: Always raises an appropriate subclass.
        """
        raise self._client.translate_api_exception(
            e,
            resource_type=resource_type,
            namespace=namespace,
        ) from e
