"""Output formatting for check results.

Usage:
    from kubeai_doctor.cli.output import OutputFormat, get_formatter

    formatter = get_formatter(OutputFormat.JSON, console)
    formatter.format_result(result)
"""

from kubeai_doctor.cli.output.formatters import (
    CheckFormatter,
    JsonFormatter,
    OutputFormat,
    TableFormatter,
    TextFormatter,
    YamlFormatter,
    get_formatter,
)

__all__ = [
    "CheckFormatter",
    "JsonFormatter",
    "OutputFormat",
    "TableFormatter",
    "TextFormatter",
    "YamlFormatter",
    "get_formatter",
]
