"""Shared pytest fixtures for kubeai_doctor tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator, Iterable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from kubeai_doctor.integrations.kubernetes import config as k8s_config
from kubeai_doctor.logging import config as logging_config


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate each test from the user's environment and config file."""
    for key in list(os.environ.keys()):
        if key.startswith("KUBEAI_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(k8s_config, "CONFIG_FILE", tmp_path / "config.yaml")
    monkeypatch.setattr(logging_config, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(logging_config, "LOG_FILE", tmp_path / "logs" / "kubeai-doctor.log")


@pytest.fixture(autouse=True)
def reset_logging_handlers() -> Generator[None]:
    """Remove handlers installed by configure_logging after each test."""
    yield
    root = logging.getLogger()
    for handler in list(logging_config._installed_handlers):
        root.removeHandler(handler)
        handler.close()
    logging_config._installed_handlers.clear()


# ============================================================================
# Kubernetes object factories
# ============================================================================


def _metadata(obj: MagicMock, name: str, namespace: str | None) -> None:
    obj.metadata.name = name
    obj.metadata.namespace = namespace
    obj.metadata.creation_timestamp = None
    obj.metadata.labels = None


def build_node(
    name: str,
    ready: str | None = "True",
    *,
    has_status: bool = True,
    extra_conditions: Iterable[tuple[str, str]] = (),
    roles: Iterable[str] = (),
) -> MagicMock:
    """Build a V1Node-like mock.

    ``ready`` is the status of the Ready condition, or None to omit it.
    """
    obj = MagicMock()
    _metadata(obj, name, None)
    obj.metadata.labels = {f"node-role.kubernetes.io/{role}": "" for role in roles}
    if not has_status:
        obj.status = None
        return obj

    conditions = []
    for cond_type, cond_status in [*extra_conditions, *([("Ready", ready)] if ready else [])]:
        cond = MagicMock()
        cond.type = cond_type
        cond.status = cond_status
        conditions.append(cond)
    obj.status.conditions = conditions
    obj.status.node_info.kubelet_version = "v1.30.2"
    return obj


def build_pod(
    name: str,
    phase: str | None = "Running",
    *,
    namespace: str = "default",
    has_status: bool = True,
) -> MagicMock:
    """Build a V1Pod-like mock. ``phase=None`` leaves the phase unset."""
    obj = MagicMock()
    _metadata(obj, name, namespace)
    obj.spec.node_name = "worker-1"
    if has_status:
        obj.status.phase = phase
    else:
        obj.status = None
    return obj


def build_service(name: str, *, namespace: str = "default") -> MagicMock:
    """Build a V1Service-like mock."""
    obj = MagicMock()
    _metadata(obj, name, namespace)
    obj.spec.type = "ClusterIP"
    obj.spec.cluster_ip = "10.96.0.10"
    return obj


def build_event(
    name: str,
    message: str | None = "Back-off restarting failed container",
    *,
    namespace: str = "default",
) -> MagicMock:
    """Build a CoreV1Event-like mock. ``message=None`` leaves it unset."""
    obj = MagicMock()
    _metadata(obj, name, namespace)
    obj.type = "Warning"
    obj.reason = "BackOff"
    obj.message = message
    obj.count = 3
    obj.last_timestamp = None
    obj.involved_object.kind = "Pod"
    obj.involved_object.name = "web-1"
    return obj


def list_response(items: list[Any]) -> MagicMock:
    """Wrap items the way list_* API calls return them."""
    response = MagicMock()
    response.items = items
    return response


@pytest.fixture
def make_node() -> Callable[..., MagicMock]:
    return build_node


@pytest.fixture
def make_pod() -> Callable[..., MagicMock]:
    return build_pod


@pytest.fixture
def make_service() -> Callable[..., MagicMock]:
    return build_service


@pytest.fixture
def make_event() -> Callable[..., MagicMock]:
    return build_event


@pytest.fixture
def make_list() -> Callable[[list[Any]], MagicMock]:
    return list_response


@pytest.fixture
def mock_k8s_client() -> MagicMock:
    """Create a mock KubernetesClient with a core_v1 sub-mock."""
    mock_client = MagicMock()
    mock_client.request_kwargs.return_value = {}
    mock_client.get_current_context.return_value = "test-context"
    return mock_client
