"""Version information for kubeai_doctor."""

__version__ = "0.1.0"
