"""Kubernetes integration configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from kubeai_doctor.integrations.kubernetes.exceptions import KubernetesConfigError

# XDG-compliant config location
CONFIG_DIR = Path.home() / ".config" / "kubeai-doctor"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class KubernetesConfig(BaseModel):
    """Connection and output settings for a single health check run.

    Credential discovery itself is left to the kubernetes client; this model
    only selects which kubeconfig file and context it should use.
    """

    model_config = ConfigDict(extra="forbid")

    context: str | None = None
    kubeconfig: str | None = None
    request_timeout: int | None = None
    output_format: Literal["text", "table", "json", "yaml"] = "text"

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str | None) -> str | None:
        """Expand ~ in kubeconfig path."""
        if v is None:
            return None
        return str(Path(v).expanduser())

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: int | None) -> int | None:
        """Validate timeout is positive."""
        if v is not None and v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_output_format(cls, v: Any) -> Any:
        """Accept output formats case-insensitively."""
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KubernetesConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            KUBEAI_CONTEXT: Kubeconfig context to use
            KUBEAI_KUBECONFIG: Kubeconfig file path
            KUBEAI_TIMEOUT: Per-request timeout in seconds
            KUBEAI_OUTPUT: Output format (text, table, json, yaml)
        """
        config_dict = base_config.copy() if base_config else {}

        if context := os.environ.get("KUBEAI_CONTEXT"):
            config_dict["context"] = context

        if kubeconfig := os.environ.get("KUBEAI_KUBECONFIG"):
            config_dict["kubeconfig"] = kubeconfig

        if timeout := os.environ.get("KUBEAI_TIMEOUT"):
            config_dict["request_timeout"] = timeout

        if output_format := os.environ.get("KUBEAI_OUTPUT"):
            config_dict["output_format"] = output_format

        return cls.model_validate(config_dict)

    def with_overrides(self, **overrides: Any) -> KubernetesConfig:
        """Return a copy with non-None overrides applied and re-validated.

        Raises:
            KubernetesConfigError: If an override fails validation.
        """
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return type(self).model_validate(data)
        except ValidationError as e:
            raise KubernetesConfigError(f"Invalid configuration: {e}") from e


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML config file, returning an empty dict when it is absent."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as e:
        raise KubernetesConfigError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise KubernetesConfigError(f"Config file {path} must contain a mapping")
    return data


def load_config(path: Path | None = None) -> KubernetesConfig:
    """Load configuration from file and environment.

    Args:
        path: Explicit config file. Defaults to ``KUBEAI_CONFIG`` or
            ``~/.config/kubeai-doctor/config.yaml``.

    Returns:
        The validated configuration.

    Raises:
        KubernetesConfigError: If the file or environment values are invalid.
    """
    if path is None:
        env_path = os.environ.get("KUBEAI_CONFIG")
        path = Path(env_path).expanduser() if env_path else CONFIG_FILE

    try:
        return KubernetesConfig.from_env(_read_config_file(path))
    except ValidationError as e:
        raise KubernetesConfigError(f"Invalid configuration: {e}") from e
