"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer

from kubeai_doctor.cli.commands import check

app = typer.Typer(
    name="kubeai-doctor",
    help="AI-powered Kubernetes troubleshooting tool.",
    add_completion=False,
)

app.command(name="check")(check.check)


if __name__ == "__main__":
    app()
