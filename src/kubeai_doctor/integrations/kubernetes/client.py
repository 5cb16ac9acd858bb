"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client with credential discovery,
lazy API group initialization, and consistent error translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
import yaml
from urllib3.exceptions import HTTPError, MaxRetryError
from urllib3.exceptions import TimeoutError as TransportTimeoutError

from kubeai_doctor.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
)

if TYPE_CHECKING:
    from kubernetes.client import CoreV1Api

    from kubeai_doctor.integrations.kubernetes.config import KubernetesConfig

logger = structlog.get_logger()


class KubernetesClient:
    """Read-only Kubernetes API client.

    Wraps the official kubernetes Python client with:
    - Kubeconfig loading with in-cluster service account fallback
    - Lazy API group initialization
    - Consistent error translation to custom exceptions
    - Context manager support

    Example:
        ```python
        from kubeai_doctor.integrations.kubernetes import KubernetesClient
        from kubeai_doctor.integrations.kubernetes.config import KubernetesConfig

        with KubernetesClient(KubernetesConfig.from_env()) as client:
            nodes = client.core_v1.list_node()
            print(f"Cluster has {len(nodes.items)} nodes")
        ```
    """

    def __init__(self, config: KubernetesConfig) -> None:
        """Initialize Kubernetes client from config.

        Loads kubeconfig and sets the active context. When no kubeconfig file
        or context was requested explicitly and no kubeconfig can be found,
        falls back to in-cluster service account configuration.

        Args:
            config: Connection settings.

        Raises:
            KubernetesConnectionError: If no usable configuration is found.
        """
        self._config = config
        self._current_context: str | None = None

        # Lazy-loaded API group instances
        self._core_v1: CoreV1Api | None = None

        self._load_config()

        logger.info("client_initialized", context=self._current_context)

    def _load_config(self) -> None:
        """Load Kubernetes configuration from kubeconfig or in-cluster."""
        from kubernetes import config
        from kubernetes.config import ConfigException

        kubeconfig_path = self._config.kubeconfig
        context = self._config.context

        try:
            config.load_kube_config(config_file=kubeconfig_path, context=context)
            self._current_context = context or "current-context"
            logger.debug("loaded_kubeconfig", context=context, kubeconfig=kubeconfig_path)
        except ConfigException as e:
            if kubeconfig_path or context:
                raise KubernetesConnectionError(
                    message=f"Cannot load kubeconfig (context: {context or 'default'})",
                    original_error=e,
                ) from e
            try:
                config.load_incluster_config()
                self._current_context = "in-cluster"
                logger.debug("loaded_incluster_config")
            except ConfigException as incluster_error:
                raise KubernetesConnectionError(
                    message="Cannot load Kubernetes configuration. "
                    "Ensure kubeconfig exists or running inside a cluster.",
                    original_error=incluster_error,
                ) from incluster_error
        except (OSError, yaml.YAMLError) as e:
            raise KubernetesConnectionError(
                message=f"Cannot read kubeconfig {kubeconfig_path or '~/.kube/config'}",
                original_error=e,
            ) from e

        self._core_v1 = None

    @property
    def core_v1(self) -> CoreV1Api:
        """Get CoreV1Api instance (nodes, pods, services, events)."""
        if self._core_v1 is None:
            from kubernetes.client import CoreV1Api

            self._core_v1 = CoreV1Api()
        return self._core_v1

    def get_current_context(self) -> str:
        """Get the current active context name.

        Returns:
            The context name, or 'in-cluster' if running inside a pod.
        """
        return self._current_context or "unknown"

    def request_kwargs(self) -> dict[str, Any]:
        """Extra keyword arguments to pass to every API call."""
        if self._config.request_timeout:
            return {"_request_timeout": self._config.request_timeout}
        return {}

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Translate a kubernetes or transport exception to a custom exception.

        Args:
            e: The original exception.
            resource_type: Type of resource being listed.
            namespace: Namespace the request was scoped to.

        Returns:
            An appropriate KubernetesError subclass.
        """
        from kubernetes.client import ApiException

        if isinstance(e, KubernetesError):
            return e

        if isinstance(e, TransportTimeoutError) or (
            isinstance(e, MaxRetryError) and isinstance(e.reason, TransportTimeoutError)
        ):
            return KubernetesTimeoutError(message=f"Request to list {resource_type} timed out")

        if isinstance(e, HTTPError):
            return KubernetesConnectionError(
                message="Cannot reach the Kubernetes API server",
                original_error=e,
            )

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e),
                resource_type=resource_type,
                namespace=namespace,
            )

        status = e.status

        if status in (401, 403):
            return KubernetesAuthError(
                message=e.reason or "Authentication/authorization failed",
                status_code=status,
                reason=e.reason,
            )

        if status == 404:
            return KubernetesNotFoundError(resource_type=resource_type, namespace=namespace)

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {status}",
            status_code=status,
            resource_type=resource_type,
            namespace=namespace,
        )

    def close(self) -> None:
        """Close the client and release resources."""
        if self._core_v1 is not None:
            self._core_v1.api_client.close()
        self._core_v1 = None
        logger.debug("Kubernetes client closed")

    def __enter__(self) -> KubernetesClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
