"""kubeai-doctor - Kubernetes cluster health checks from the command line."""

from kubeai_doctor.__version__ import __version__

__all__ = ["__version__"]
