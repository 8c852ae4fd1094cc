"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context
        return "storyblok_to_zod"

    cmd_parts = ["storyblok_to_zod"]

    for param in click_command.params:
        if not isinstance(param, click.Option) or param.name not in cli_args:
            continue

        value = cli_args[param.name]
        if value is None or value == param.default:
            continue

        # Verbosity does not change the output
        if param.name in ("verbose", "debug"):
            continue

        if param.is_flag:
            if param.secondary_opts and not value:
                cmd_parts.append(param.secondary_opts[0])
            elif value:
                cmd_parts.append(param.opts[0])
            continue

        # Paths are shown by name only so the header does not depend on the machine
        if isinstance(value, (str, Path)) and Path(str(value)).is_absolute():
            value = Path(str(value)).name

        flag = param.opts[0] if param.opts else f"--{param.name}"
        cmd_parts.extend([flag, str(value)])

    return " ".join(cmd_parts)
