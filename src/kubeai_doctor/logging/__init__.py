"""Logging configuration for kubeai_doctor."""

from kubeai_doctor.logging.config import configure_logging

__all__ = ["configure_logging"]
