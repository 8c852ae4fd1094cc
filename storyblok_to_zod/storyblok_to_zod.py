import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .pipeline import CodeGeneratorConfig, PipelineGenerator, StoryblokToZodError


def configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_config(path: str | None) -> CodeGeneratorConfig:
    if path is None:
        return CodeGeneratorConfig()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON ({e})", param_hint="--config") from e
    if not isinstance(data, dict):
        raise click.BadParameter("expected a JSON object", param_hint="--config")
    return CodeGeneratorConfig.from_dict(data)


@click.command()
@click.option("--space", "-s", required=True, type=str, help="Components subfolder (the Storyblok space id)")
@click.option(
    "--folder",
    "-f",
    default=".storyblok",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Root folder holding components/ and types/",
)
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False), help="Output file; stdout when omitted")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False), help="JSON config file")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress")
@click.option("--debug", "-d", is_flag=True, default=False, help="Log everything")
@click.option(
    "--array-extension-bypass/--no-array-extension-bypass",
    default=None,
    help="Emit array schemas directly for interfaces extending Array<T>",
)
@click.option("--format/--no-format", "format_output", default=None, help="Run prettier on the generated module")
def storyblok_to_zod(space, folder, output, config, verbose, debug, array_extension_bypass, format_output):
    """Generate Zod schemas from Storyblok component definitions."""
    configure_logging(verbose, debug)
    config = load_config(config)

    # CLI flags override the config file
    if array_extension_bypass is not None:
        config.array_extension_bypass = array_extension_bypass
    if format_output is not None:
        config.formatter.enabled = format_output

    command_line = reconstruct_command_line(storyblok_to_zod)
    codegen = PipelineGenerator(space, folder, config, command_line=command_line)

    try:
        result = codegen.run()
        if output is None:
            click.echo(result.text.rstrip())
        else:
            codegen.write(result.text, output)
    except StoryblokToZodError as e:
        raise click.ClickException(str(e)) from e

    if output is not None:
        click.secho(f"Zod schemas written to {output}", fg="green", err=True)
    if result.skipped:
        click.secho(f"Skipped components: {', '.join(result.skipped)}", fg="yellow", err=True)
