"""Kubernetes integration - API client and configuration models."""

from kubeai_doctor.integrations.kubernetes.client import KubernetesClient
from kubeai_doctor.integrations.kubernetes.config import KubernetesConfig, load_config
from kubeai_doctor.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConfigError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
)

__all__ = [
    "KubernetesAuthError",
    "KubernetesClient",
    "KubernetesConfig",
    "KubernetesConfigError",
    "KubernetesConnectionError",
    "KubernetesError",
    "KubernetesNotFoundError",
    "KubernetesTimeoutError",
    "load_config",
]
