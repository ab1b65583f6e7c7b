from __future__ import annotations

import pathlib
from typing import Optional

import typer
import structlog
from rich.console import Console

from .config import load_config, RutkitConfig
from .checksum import calculate_verification_digit
from .clean import clean_rut
from .format import format_rut, format_rut_partial
from .validate import validate_rut

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="rutkit — Chilean RUT validator and formatter")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"rutkit {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .rutkit.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    ctx.obj = {"config": load_config(config) if config else RutkitConfig(), "verbose": verbose}
    if verbose:
        log.info("verbose_enabled")


@app.command()
def validate(
    ctx: typer.Context,
    rut: str = typer.Argument(..., help="RUT to check, e.g. 12.345.678-5"),
):
    """Check a RUT and print the cleaned value or the rejection reason."""
    result = validate_rut(rut)
    if not result.is_valid:
        if ctx.obj["verbose"]:
            log.info("rut_rejected", reason=result.error)
        console.print(f"[red]invalid[/red] {result.error}")
        raise typer.Exit(code=1)
    console.print(f"[green]valid[/green] {result.rut}")


@app.command("format")
def format_cmd(
    ctx: typer.Context,
    rut: str = typer.Argument(..., help="RUT to format"),
    dots: Optional[bool] = typer.Option(None, "--dots/--no-dots", help="Thousands separators in the body"),
    dash: Optional[bool] = typer.Option(None, "--dash/--no-dash", help="Dash before the check digit"),
    uppercase: Optional[bool] = typer.Option(None, "--upper/--lower", help="Case of a K check digit"),
    partial: Optional[bool] = typer.Option(None, "--partial/--strict", help="Format without checksum validation"),
):
    """Print the display form of a RUT."""
    cfg: RutkitConfig = ctx.obj["config"]
    overrides = {"dots": dots, "dash": dash, "uppercase": uppercase}
    opts = cfg.format.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    use_partial = cfg.partial if partial is None else partial

    rendered = format_rut_partial(rut, opts) if use_partial else format_rut(rut, opts)
    if not rendered:
        if ctx.obj["verbose"]:
            log.info("rut_rejected", reason="not formattable")
        console.print(f"[red]cannot format[/red] {rut!r}")
        raise typer.Exit(code=1)
    console.print(rendered, highlight=False)


@app.command()
def clean(rut: str = typer.Argument(..., help="Raw RUT text")):
    """Strip everything except digits and K."""
    console.print(clean_rut(rut), highlight=False)


@app.command()
def dv(body: str = typer.Argument(..., help="RUT body without check digit")):
    """Compute the check digit for a RUT body."""
    digits = clean_rut(body)
    try:
        digit = calculate_verification_digit(digits)
    except ValueError:
        raise typer.BadParameter("body must contain digits only", param_hint="BODY") from None
    console.print(digit, highlight=False)
