#!/usr/bin/env python3
"""Generate CLI reference documentation from the hearth typer app."""

import inspect
import sys
from pathlib import Path

# Add parent directory to path to import hearth
sys.path.insert(0, str(Path(__file__).parent.parent))

from typing import Any

from typer.models import ArgumentInfo, OptionInfo

from hearth.cli import app


def format_option(param_name: str, option: OptionInfo) -> str:
    """Format an option with its flags, help text and default."""
    flags = list(option.param_decls or []) or [f"--{param_name.replace('_', '-')}"]
    line = "- " + ", ".join(f"`{flag}`" for flag in flags)

    if option.help:
        line += f": {option.help}"

    if option.default is not None and option.default is not False and option.default is not ...:
        line += f" (default: {option.default})"

    return line


def format_argument(param_name: str, argument: ArgumentInfo | None) -> str:
    """Format a positional argument, marking whether it is required."""
    required = argument is None or argument.default is ...
    line = f"- `{param_name.upper()}`"

    if argument is not None and argument.help:
        line += f": {argument.help}"

    return line + (" (required)" if required else " (optional)")


def generate_command_doc(command_name: str, command_obj: Any) -> str:
    """Generate documentation for a single command."""
    callback = command_obj.callback
    doc = (callback.__doc__ or "No description available.").strip()

    lines = [
        f"### {command_name}",
        "",
        doc,
        "",
        "**Usage:**",
        "",
        "```bash",
        f"hearth {command_name}",
        "```",
        "",
    ]

    arguments: list[str] = []
    options: list[str] = []

    for param_name, param in inspect.signature(callback).parameters.items():
        default = param.default
        if isinstance(default, OptionInfo):
            options.append(format_option(param_name, default))
        elif isinstance(default, ArgumentInfo):
            arguments.append(format_argument(param_name, default))
        elif default is inspect.Parameter.empty:
            arguments.append(format_argument(param_name, None))

    if arguments:
        lines += ["**Arguments:**", "", *arguments, ""]

    if options:
        lines += ["**Options:**", "", *options, ""]

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "# CLI Commands Reference",
        "",
        "Complete reference for all hearth CLI commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "hearth [COMMAND] [OPTIONS]",
        "```",
        "",
        "## Commands",
        "",
    ]

    commands = sorted(
        app.registered_commands,
        key=lambda x: x.name or (x.callback.__name__ if x.callback else ""),
    )
    for command_obj in commands:
        command_name = command_obj.name or (command_obj.callback.__name__ if command_obj.callback else "unknown")
        lines.append(generate_command_doc(command_name, command_obj))
        lines.append("")

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "cli.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
