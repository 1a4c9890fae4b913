"""pdfblock Command Line Interface.

Entry point for the pdfblock CLI tool: check a host environment, render
the PDF viewer block, and list registered blocks.
"""

import platform
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError

from pdfblock import __version__
from pdfblock.blocks.media import parse_attachment_id
from pdfblock.contracts import BlockNotFoundError, BlockRenderError, HostEnvironment
from pdfblock.core.config import MediaSettings, PdfBlockSettings, load_settings
from pdfblock.core.logging import configure_logging

app = typer.Typer(
    name="pdfblock",
    help="pdfblock: PDF.js viewer block with host environment checks.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pdfblock version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """pdfblock: PDF.js viewer block with host environment checks."""
    pass


def _load(settings: str | None) -> PdfBlockSettings:
    """Load settings from file, or defaults when no file is given."""
    if settings is None:
        config = PdfBlockSettings()
    else:
        try:
            config = load_settings(Path(settings))
        except FileNotFoundError:
            typer.echo(f"Error: Settings file not found: {settings}", err=True)
            raise typer.Exit(1) from None
        except ValidationError as e:
            typer.echo("Configuration errors:", err=True)
            for error in e.errors():
                loc = ".".join(str(x) for x in error["loc"])
                typer.echo(f"  - {loc}: {error['msg']}", err=True)
            raise typer.Exit(1) from None

    configure_logging(config.log_level)
    return config


def _parse_media(entries: list[str]) -> dict[int, str]:
    """Parse ID=URL pairs given on the command line."""
    attachments: dict[int, str] = {}
    for entry in entries:
        key, sep, url = entry.partition("=")
        attachment_id = parse_attachment_id(key) if sep else None
        if attachment_id is None:
            typer.echo(f"Error: --media expects ID=URL, got: {entry}", err=True)
            raise typer.Exit(1)
        attachments[attachment_id] = url
    return attachments


@app.command()
def check(
    settings: str | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
    extension_loaded: bool = typer.Option(
        True,
        "--extension-loaded/--no-extension-loaded",
        help="Whether the host extension reported that it finished loading.",
    ),
    extension_version: str | None = typer.Option(
        None,
        "--extension-version",
        "-e",
        help="Version reported by the host extension.",
    ),
    runtime_version: str | None = typer.Option(
        None,
        "--runtime-version",
        "-r",
        help="Runtime version (defaults to the running interpreter).",
    ),
) -> None:
    """Run the environment guard against the given host values.

    Prints the admin notice and exits with code 1 when a check fails.
    """
    from pdfblock.bootstrap import build_guard
    from pdfblock.core.notices import NoticeBoard

    config = _load(settings)
    host = HostEnvironment(
        extension_loaded=extension_loaded,
        extension_version=extension_version,
        runtime_version=runtime_version or platform.python_version(),
    )

    notices = NoticeBoard()
    result = build_guard(config).on_plugins_loaded(host, notices)

    typer.echo(f"Environment check: {result.value}")
    if not result.passed:
        typer.echo(notices.render_all())
        raise typer.Exit(1)


@app.command()
def render(
    settings: str | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
    block: str = typer.Option(
        "wcf/pdfjsblock",
        "--block",
        "-b",
        help="Name of the block to render.",
    ),
    file: str | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Attachment id of the PDF document.",
    ),
    width: str | None = typer.Option(
        None,
        "--width",
        help="iframe width (block default when omitted).",
    ),
    height: str | None = typer.Option(
        None,
        "--height",
        help="iframe height (block default when omitted).",
    ),
    media: list[str] = typer.Option(
        [],
        "--media",
        "-m",
        help="Attachment mapping ID=URL (repeatable).",
    ),
) -> None:
    """Render one block instance and print its HTML."""
    from pdfblock.plugins.manager import BlockManager

    config = _load(settings)
    if media:
        attachments = {**config.media.attachments, **_parse_media(media)}
        config = config.model_copy(
            update={"media": MediaSettings(attachments=attachments)}
        )

    attributes: dict[str, Any] = {}
    if file is not None:
        attributes["pdfjs_viewer_file"] = file
    if width is not None:
        attributes["pdf_width"] = width
    if height is not None:
        attributes["pdf_height"] = height

    manager = BlockManager(config)
    manager.register_builtin_blocks()

    try:
        html = manager.render_block(block, attributes)
    except BlockNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    except BlockRenderError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    typer.echo(html)


# === Blocks subcommand ===

blocks_app = typer.Typer(help="Block registry commands.")
app.add_typer(blocks_app, name="blocks")


@blocks_app.command("list")
def blocks_list(
    settings: str | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
) -> None:
    """List registered blocks and their fields."""
    from pdfblock.plugins.manager import BlockManager

    config = _load(settings)
    manager = BlockManager(config)
    manager.register_builtin_blocks()

    for definition in manager.get_blocks():
        typer.echo(f"{definition.name}: {definition.title}")
        for item in (field.to_dict() for field in definition.items):
            extra = ""
            if "default" in item:
                extra += f" (default: {item['default']})"
            if "attachment_type" in item:
                extra += f" [{item['attachment_type']}]"
            typer.echo(f"  {item['id']:20} {item['type']:12} {item['label']}{extra}")


if __name__ == "__main__":
    app()
