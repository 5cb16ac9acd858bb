"""Command line interface for kubeai-doctor."""
