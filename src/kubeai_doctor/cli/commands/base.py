"""Base utilities for CLI commands.

Provides common Typer options, the shared consoles, and error handling.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from kubeai_doctor.cli.output import OutputFormat
from kubeai_doctor.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConfigError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
)

# Check output goes to stdout, diagnostics to stderr; ":name:" text prints verbatim
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


# =============================================================================
# Common Typer Option Annotations
# =============================================================================

CheckOption = Annotated[
    str,
    typer.Option(
        "--check",
        "-c",
        metavar="RESOURCE",
        help="Run a health check on a specific Kubernetes resource "
        "(e.g., nodes, pods, services, events)",
    ),
]

NamespaceOption = Annotated[
    str | None,
    typer.Option(
        "--namespace",
        "-n",
        metavar="NAMESPACE",
        help="Specify a Kubernetes namespace (default: all namespaces)",
    ),
]

OutputOption = Annotated[
    OutputFormat | None,
    typer.Option(
        "--output",
        "-o",
        help="Output format: text, table, json, or yaml",
        case_sensitive=False,
    ),
]

ContextOption = Annotated[
    str | None,
    typer.Option(
        "--context",
        help="Kubeconfig context to use (default: current context)",
    ),
]

KubeconfigOption = Annotated[
    str | None,
    typer.Option(
        "--kubeconfig",
        help="Path to the kubeconfig file",
    ),
]


# =============================================================================
# Error Handling
# =============================================================================


def handle_k8s_error(error: KubernetesError) -> None:
    """Report a Kubernetes error on stderr and exit.

    Args:
        error: The Kubernetes error to handle.

    Raises:
        typer.Exit: Always exits with code 1.
    """
    if isinstance(error, KubernetesConnectionError):
        err_console.print("[red]Error:[/red] Cannot connect to Kubernetes cluster")
        err_console.print(f"  {error.message}", markup=False)
        if error.original_error:
            err_console.print(f"  Cause: {error.original_error}", markup=False)
        err_console.print(
            "\n[dim]Hint: Check that your kubeconfig is valid and the cluster is reachable.[/dim]"
        )

    elif isinstance(error, KubernetesAuthError):
        err_console.print("[red]Error:[/red] Authentication/authorization failed")
        err_console.print(f"  {error.message}", markup=False)
        err_console.print("\n[dim]Hint: Check your credentials, token, or RBAC permissions.[/dim]")

    elif isinstance(error, KubernetesNotFoundError):
        err_console.print("[red]Error:[/red] Resource not found")
        err_console.print(f"  {error.message}", markup=False)

    elif isinstance(error, KubernetesTimeoutError):
        err_console.print("[red]Error:[/red] Request timed out")
        err_console.print(f"  {error.message}", markup=False)
        err_console.print(
            "\n[dim]Hint: Raise the limit with KUBEAI_TIMEOUT or request_timeout.[/dim]"
        )

    elif isinstance(error, KubernetesConfigError):
        err_console.print("[red]Error:[/red] Invalid configuration")
        err_console.print(f"  {error.message}", markup=False)

    else:
        err_console.print(f"[red]Error:[/red] {escape(error.message)}")
        if error.status_code:
            err_console.print(f"  HTTP Status: {error.status_code}")

    raise typer.Exit(1)
