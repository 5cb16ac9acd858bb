"""Health check command.

Dispatches ``--check`` to one of the node, pod, service, or event checks
and renders the result.
"""

from __future__ import annotations

import structlog
import typer

from kubeai_doctor import __version__
from kubeai_doctor.cli.commands.base import (
    CheckOption,
    ContextOption,
    KubeconfigOption,
    NamespaceOption,
    OutputOption,
    console,
    err_console,
    handle_k8s_error,
)
from kubeai_doctor.cli.output import OutputFormat, get_formatter
from kubeai_doctor.integrations.kubernetes.client import KubernetesClient
from kubeai_doctor.integrations.kubernetes.config import load_config
from kubeai_doctor.integrations.kubernetes.exceptions import (
    InvalidResourceKindError,
    KubernetesError,
)
from kubeai_doctor.integrations.kubernetes.models import ResourceKind
from kubeai_doctor.logging.config import configure_logging
from kubeai_doctor.services.kubernetes import ClusterHealthChecker

logger = structlog.get_logger()

# Exit code for an unrecognized --check value, matching Click usage errors
INVALID_RESOURCE_EXIT_CODE = 2


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kubeai-doctor version {__version__}")
        raise typer.Exit()


def check(
    resource: CheckOption,
    namespace: NamespaceOption = None,
    output: OutputOption = None,
    context: ContextOption = None,
    kubeconfig: KubeconfigOption = None,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """AI-powered Kubernetes troubleshooting tool.

    Examples:
        kubeai-doctor --check nodes
        kubeai-doctor -c pods -n kube-system
        kubeai-doctor -c events -o json
    """
    configure_logging(verbose=verbose, debug=debug)

    try:
        kind = ResourceKind.parse(resource)
    except InvalidResourceKindError:
        logger.info("invalid_resource_kind", resource=resource)
        err_console.print(
            "[red]\\[ERROR][/red] Invalid resource. "
            "Use 'nodes', 'pods', 'services', or 'events'."
        )
        raise typer.Exit(INVALID_RESOURCE_EXIT_CODE) from None

    if namespace and not kind.namespaced:
        logger.info("namespace_ignored", kind=kind.value, namespace=namespace)

    try:
        config = load_config().with_overrides(
            context=context,
            kubeconfig=kubeconfig,
            output_format=output.value if output else None,
        )
        formatter = get_formatter(OutputFormat(config.output_format), console)
        formatter.format_start(kind)

        with KubernetesClient(config) as client:
            cluster_context = client.get_current_context()
            checker = ClusterHealthChecker(client)
            result = checker.run(kind, namespace if kind.namespaced else None)

        formatter.format_result(result)
        logger.info(
            "check_completed",
            kind=kind.value,
            context=cluster_context,
            namespace=result.namespace,
            count=len(result.items),
        )
    except KubernetesError as e:
        logger.info("check_failed", kind=kind.value, error=str(e))
        handle_k8s_error(e)
