"""Kubernetes service module.

Provides the health check manager used by the CLI.
"""

from kubeai_doctor.services.kubernetes.health_checker import ClusterHealthChecker

__all__ = ["ClusterHealthChecker"]
