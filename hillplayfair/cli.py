"""
Command-Line Interface
=======================

Click-based command-line interface for the Hill -> Playfair pipeline.

Usage::

    python -m hillplayfair encrypt key.txt plain.txt keyword.txt
    python -m hillplayfair --output text encrypt key.txt plain.txt keyword.txt
    python -m hillplayfair --output json -f run.json encrypt key.txt plain.txt keyword.txt
    python -m hillplayfair table MONARCHY

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from shared.config import ToolConfig
from shared.console import ToolConsole
from shared.models import RunResult

from hillplayfair import __version__
from hillplayfair.ciphers import build_table, sanitize_keyword
from hillplayfair.core.engine import HillPlayfairEngine
from hillplayfair.core.errors import HillPlayfairError
from hillplayfair.core.models import PipelineTrace
from hillplayfair.output.console import PipelineConsoleOutput
from hillplayfair.output.report import PipelineReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="hillplayfair")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "text", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the text or JSON report to this file.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner and log output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Hill cipher followed by Playfair cipher, with a full stage trace."""
    ctx.ensure_object(dict)

    try:
        tool_config = ToolConfig.load(config)
    except TypeError as exc:
        raise click.UsageError(str(exc)) from exc
    pipeline = tool_config.pipeline
    ctx.obj["config"] = tool_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file

    console = ToolConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["display"] = PipelineConsoleOutput(console, wrap_width=pipeline.wrap_width)
    ctx.obj["reporter"] = PipelineReportGenerator(
        wrap_width=pipeline.wrap_width,
        matrix_indent=pipeline.matrix_indent,
    )
    try:
        ctx.obj["engine"] = HillPlayfairEngine(tool_config, console_logging=not quiet)
    except HillPlayfairError as exc:
        raise click.UsageError(str(exc)) from exc

    if output == "console" and not quiet:
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: RunResult) -> None:
    """Emit *result* in the selected text or JSON format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: PipelineReportGenerator = ctx.obj["reporter"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            ctx.obj["console"].success(f"JSON report saved to: {path}")
        else:
            click.echo(reporter.render_json(result))
        return

    # text
    if not result.succeeded:
        for diagnostic in result.diagnostics:
            click.echo(f"{diagnostic.title}: {diagnostic.description}", err=True)
        return
    trace = PipelineTrace(**result.metadata)
    if output_file:
        path = reporter.generate_text(trace, Path(output_file))
        ctx.obj["console"].success(f"Text report saved to: {path}")
    else:
        click.echo(reporter.render_text(trace), nl=False)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("key_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("plaintext_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("keyword_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def encrypt(
    ctx: click.Context,
    key_file: str,
    plaintext_file: str,
    keyword_file: str,
) -> None:
    """Encrypt PLAINTEXT_FILE with the Hill key, then the Playfair keyword.

    KEY_FILE holds the dimension n followed by the n*n key entries.
    KEYWORD_FILE holds the Playfair keyword.
    """
    engine: HillPlayfairEngine = ctx.obj["engine"]
    console: ToolConsole = ctx.obj["console"]

    result = engine.encrypt_files(Path(key_file), Path(plaintext_file), Path(keyword_file))

    if ctx.obj["output_format"] == "console":
        if result.succeeded:
            display: PipelineConsoleOutput = ctx.obj["display"]
            display.display_trace(PipelineTrace(**result.metadata))
            console.success(result.summary)
        else:
            console.diagnostics_table(result.diagnostics)
            console.error(result.summary)
    else:
        _handle_output(ctx, result)

    if not result.succeeded:
        ctx.exit(1)


@cli.command()
@click.argument("keyword")
@click.pass_context
def table(ctx: click.Context, keyword: str) -> None:
    """Show the Playfair table built from KEYWORD."""
    sanitized = sanitize_keyword(keyword)
    playfair_table = build_table(sanitized)

    if ctx.obj["output_format"] == "console":
        display: PipelineConsoleOutput = ctx.obj["display"]
        display.display_table(playfair_table, keyword=sanitized)
    else:
        click.echo(f"Playfair Keyword:\n{sanitized}\n")
        click.echo("Playfair Table:")
        for row in playfair_table.rows:
            click.echo(" ".join(row))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the hillplayfair CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
