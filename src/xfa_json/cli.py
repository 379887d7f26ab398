from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from dotenv import load_dotenv

from xfa_json.constants import EXIT_CONVERSION, EXIT_INPUT
from xfa_json.errors import InputReadError, XfaConversionError
from xfa_json.logging_setup import configure_logging, get_logger
from xfa_json.paths import Paths
from xfa_json.render import render_xfa
from xfa_json.settings import Settings, XfaMode
from xfa_json.source import read_xml_text

# stdout carries the converted document only
console = Console(stderr=True)

app = typer.Typer(help="Convert XFA form data to JSON")


@app.callback()
def main(
    ctx: typer.Context,
    env: str = typer.Option("dev", "--env", help="Config environment"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging on stderr."
    ),
):
    load_dotenv(override=False)
    ctx.ensure_object(dict)
    cfg_path = Paths.config_file(env)
    settings = Settings.load(cfg_path)
    ctx.obj["SETTINGS"] = settings
    ctx.obj["CONFIG_PATH"] = cfg_path

    configure_logging(
        level="DEBUG" if verbose else settings.logging.level,
        format_type=settings.logging.format,
        structured=settings.logging.structured,
    )


@app.command()
def health(ctx: typer.Context):
    settings: Settings = ctx.obj["SETTINGS"]
    console.print(
        {
            "ok": True,
            "config": str(ctx.obj["CONFIG_PATH"]),
            "mode": settings.convert.mode.value,
        }
    )


@app.command()
def convert(
    ctx: typer.Context,
    input: Optional[Path] = typer.Argument(
        None, help="XFA XML file; omit or pass '-' to read stdin"
    ),
    xfa: Optional[XfaMode] = typer.Option(
        None, "--xfa", "-x", help="Output mode (defaults to convert.mode)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the result here instead of stdout"
    ),
    indent: Optional[int] = typer.Option(None, "--indent", help="JSON indent"),
    no_fallback: bool = typer.Option(
        False, "--no-fallback", help="Fail instead of emitting raw XML"
    ),
):
    """Convert one XFA XML document."""
    settings: Settings = ctx.obj["SETTINGS"]
    log = get_logger("xfa_json.convert")

    mode = xfa or settings.convert.mode
    fallback = settings.convert.fallback_to_raw and not no_fallback

    try:
        xml = read_xml_text(input)
    except InputReadError as e:
        console.print(f"Input error: {e}", style="red", markup=False)
        raise typer.Exit(code=EXIT_INPUT)

    log.info("Converting XFA", source=str(input or "-"), mode=mode.value)
    try:
        text = render_xfa(
            xml,
            mode,
            indent=indent if indent is not None else settings.convert.indent,
            fallback_to_raw=fallback,
            filters=settings.filters,
        )
    except XfaConversionError as e:
        console.print(f"Conversion error: {e}", style="red", markup=False)
        raise typer.Exit(code=EXIT_CONVERSION)

    if text is None:
        log.info("XFA output disabled", mode=mode.value)
        return

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        log.info("Wrote output", path=str(output))
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
