"""Output formatters for health check results.

Implements the Strategy pattern for output formatting, allowing the check
command to print results as text lines, a table, JSON, or YAML.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kubeai_doctor.integrations.kubernetes.models import (
    CheckResult,
    EventSummary,
    HealthSummary,
    NodeSummary,
    PodSummary,
    ResourceKind,
)


class OutputFormat(StrEnum):
    """Supported output formats for the check command."""

    TEXT = "text"
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


# Column definitions: (field, header)
COLUMNS: dict[ResourceKind, list[tuple[str, str]]] = {
    ResourceKind.NODES: [
        ("name", "Name"),
        ("status", "Status"),
        ("roles", "Roles"),
        ("version", "Version"),
        ("age", "Age"),
    ],
    ResourceKind.PODS: [
        ("namespace", "Namespace"),
        ("name", "Name"),
        ("phase", "Phase"),
        ("node_name", "Node"),
        ("age", "Age"),
    ],
    ResourceKind.SERVICES: [
        ("namespace", "Namespace"),
        ("name", "Name"),
        ("type", "Type"),
        ("cluster_ip", "Cluster IP"),
        ("age", "Age"),
    ],
    ResourceKind.EVENTS: [
        ("namespace", "Namespace"),
        ("name", "Name"),
        ("type", "Type"),
        ("reason", "Reason"),
        ("message", "Message"),
    ],
}


def start_message(kind: ResourceKind) -> str:
    """Progress line printed before a check runs."""
    if kind is ResourceKind.EVENTS:
        return "Fetching recent Kubernetes events..."
    return f"Running health check on Kubernetes {kind.value}..."


def summary_message(summary: HealthSummary) -> str:
    return f"{summary.healthy} healthy, {summary.unhealthy} unhealthy"


class CheckFormatter(ABC):
    """Abstract base class for check result formatters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def format_start(self, kind: ResourceKind) -> None:
        """Announce a check before it runs. Silent by default."""

    @abstractmethod
    def format_result(self, result: CheckResult) -> None:
        """Format and display a check result."""

    def _print_summary(self, summary: HealthSummary | None) -> None:
        if summary is not None:
            self.console.print(f"\n[yellow]\\[SUMMARY][/yellow] {summary_message(summary)}")


class TextFormatter(CheckFormatter):
    """One line per item, with a status mark and color."""

    def format_start(self, kind: ResourceKind) -> None:
        self.console.print(f"[cyan]\\[INFO][/cyan] {start_message(kind)}")

    def format_result(self, result: CheckResult) -> None:
        for item in result.items:
            self.console.print(self.format_item(item), soft_wrap=True, emoji=False)
        self._print_summary(result.summary)

    @staticmethod
    def format_item(item: Any) -> str:
        """Render one item as a markup line."""
        name = escape(item.name)
        if isinstance(item, NodeSummary):
            if item.healthy:
                return f"✅ Node: [green]{name}[/green]"
            return f"❌ Node: [red]{name}[/red] (NotReady)"
        if isinstance(item, PodSummary):
            if item.healthy:
                return f"✅ Pod: [green]{name}[/green]"
            return f"❌ Pod: [red]{name}[/red] (Status: [red]{escape(item.phase)}[/red])"
        if isinstance(item, EventSummary):
            return f"📢 Event: [magenta]{name}[/magenta] - {escape(item.message)}"
        return f"🔹 Service: [blue]{name}[/blue]"


class TableFormatter(CheckFormatter):
    """Rich table output formatter."""

    def format_start(self, kind: ResourceKind) -> None:
        self.console.print(f"[cyan]\\[INFO][/cyan] {start_message(kind)}")

    def format_result(self, result: CheckResult) -> None:
        columns = COLUMNS[result.kind]
        title = f"{result.kind.label}s"
        if result.kind.namespaced:
            title += f" ({result.namespace or 'all namespaces'})"

        table = Table(title=title, show_header=True)
        for _field_name, header in columns:
            style = "cyan" if header in ("Name", "Namespace") else None
            table.add_column(header, style=style, overflow="fold")
        if result.summary is not None:
            table.add_column("Healthy", no_wrap=True)

        for item in result.items:
            row = [self._format_cell_value(getattr(item, field, None)) for field, _ in columns]
            if result.summary is not None:
                row.append("[green]Yes[/green]" if item.healthy else "[red]No[/red]")
            table.add_row(*row)

        self.console.print(table)
        self.console.print(f"\n[dim]Total: {len(result.items)} resources[/dim]")
        self._print_summary(result.summary)

    def _format_cell_value(self, value: Any) -> str:
        if isinstance(value, list):
            if len(value) == 0:
                return "-"
            items = [str(v) for v in value[:3]]
            result = ", ".join(items)
            if len(value) > 3:
                result += f" (+{len(value) - 3})"
            return escape(result)
        elif value is None:
            return "-"
        else:
            return escape(str(value))


class JsonFormatter(CheckFormatter):
    """JSON output formatter."""

    def format_result(self, result: CheckResult) -> None:
        data = result.model_dump(mode="json")
        self.console.print(
            json.dumps(data, indent=2, ensure_ascii=False),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )


class YamlFormatter(CheckFormatter):
    """YAML output formatter."""

    def format_result(self, result: CheckResult) -> None:
        data = result.model_dump(mode="json")
        self.console.print(
            yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )


def get_formatter(format_type: OutputFormat, console: Console | None = None) -> CheckFormatter:
    """Factory function to get the appropriate formatter."""
    if console is None:
        console = Console(emoji=False)

    formatters: dict[OutputFormat, type[CheckFormatter]] = {
        OutputFormat.TEXT: TextFormatter,
        OutputFormat.TABLE: TableFormatter,
        OutputFormat.JSON: JsonFormatter,
        OutputFormat.YAML: YamlFormatter,
    }

    formatter_class = formatters.get(format_type, TextFormatter)
    return formatter_class(console)
