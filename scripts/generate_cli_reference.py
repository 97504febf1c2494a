#!/usr/bin/env python3
"""Generate CLI reference documentation from typer app."""

import inspect
import sys
from pathlib import Path
from typing import Any

# Add parent directory to path to import calpager
sys.path.insert(0, str(Path(__file__).parent.parent))

from calpager.cli import app  # noqa: E402


def format_option(param_name: str, param: Any) -> str:
    """Format an option with its flags and help text."""
    flags = list(getattr(param, "param_decls", None) or [])
    if not flags:
        flags = [f"--{param_name.replace('_', '-')}"]

    parts = ["- " + ", ".join(f"`{flag}`" for flag in flags)]

    if getattr(param, "help", None):
        parts.append(f": {param.help}")

    default = getattr(param, "default", None)
    if default is not None and default is not False:
        parts.append(f" (default: {default})")

    return "".join(parts)


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
        f"calpager {command_name}",
        "```",
        "",
    ]

    sig = inspect.signature(callback)
    args = [name.upper() for name, param in sig.parameters.items() if param.default == inspect.Parameter.empty]
    options = [
        (name, param.default)
        for name, param in sig.parameters.items()
        if param.default != inspect.Parameter.empty and hasattr(param.default, "help")
    ]

    if args:
        lines.append("**Arguments:**")
        lines.append("")
        lines.extend(f"- `{arg}` (required)" for arg in args)
        lines.append("")

    if options:
        lines.append("**Options:**")
        lines.append("")
        lines.extend(format_option(name, option) for name, option in options)
        lines.append("")

    return "\n".join(lines)


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    lines = [
        "# CLI Commands Reference",
        "",
        "Complete reference for all calpager CLI commands and options.",
        "",
        "## Usage",
        "",
        "```bash",
        "calpager [--verbose] [COMMAND] [OPTIONS]",
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
    output_path = Path(__file__).parent.parent / "docs" / "cli-commands.md"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generate_cli_reference())
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
