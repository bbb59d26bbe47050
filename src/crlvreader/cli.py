"""Command line interface for crlvreader."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from crlvreader.config import AppConfig
from crlvreader.errors import CrlvReaderError, DocumentReadError, UnknownLayoutError
from crlvreader.extraction.anchor import find_anchor
from crlvreader.extraction.engine import CrlvExtractor
from crlvreader.extraction.layout import LayoutProfile, layout_names
from crlvreader.ingestion.pdf_loader import extract_fragments, render_fragment_dump
from crlvreader.utils.files import iter_pdf_paths, read_document
from crlvreader.utils.text import tokenize
from crlvreader.web.app import app as web_app


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="crlvreader - extract vehicle data from CRLV PDFs")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _resolve_config(layout: str, page: int) -> tuple[AppConfig, LayoutProfile]:
    try:
        config = AppConfig(layout_name=layout, page_number=page)
        return config, config.resolve_layout()
    except UnknownLayoutError as exc:
        raise typer.BadParameter(f"{exc} (available: {', '.join(layout_names())})") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def parse(
    inputs: List[Path] = typer.Argument(
        ..., help="CRLV PDFs or directories containing them.", resolve_path=True
    ),
    layout: str = typer.Option(AppConfig().layout_name, "--layout", help="Layout profile name"),
    page: int = typer.Option(AppConfig().page_number, "--page", help="Zero-based page to read"),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per document"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Extract registration data from one or more CRLV PDFs."""
    _setup_logging(verbose)
    config, profile = _resolve_config(layout, page)
    extractor = CrlvExtractor(
        profile, page_number=config.page_number, verify_layout=config.verify_layout
    )

    pdf_paths = list(iter_pdf_paths(inputs))
    if not pdf_paths:
        console.print("[yellow]No PDFs found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File")
    table.add_column("Placa")
    table.add_column("Renavam")
    table.add_column("Chassi")
    table.add_column("Marca/Modelo")
    table.add_column("Ano")

    parsed = 0
    failed = 0
    for path in pdf_paths:
        try:
            document = extractor.parse(read_document(path, max_bytes=config.max_document_bytes))
        except CrlvReaderError as exc:
            failed += 1
            err_console.print(
                f"[red]Failed[/red] {escape(str(path))}: {escape(str(exc))}", soft_wrap=True
            )
            continue

        parsed += 1
        if as_json:
            typer.echo(json.dumps({"file": str(path), **document.to_dict()}, ensure_ascii=False))
            continue
        table.add_row(
            path.name,
            document.placa or "-",
            document.renavam or "-",
            document.chassi or "-",
            " ".join(part for part in (document.marca, document.modelo) if part) or "-",
            f"{document.ano_fabricacao or '-'}/{document.ano_modelo or '-'}",
        )

    if not as_json:
        if parsed:
            console.print(table)
        console.print(f"Parsed: {parsed}, failed: {failed}")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def dump(
    pdf: Path = typer.Argument(..., help="PDF to inspect.", resolve_path=True),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the dump to a file"),
    page: int = typer.Option(AppConfig().page_number, "--page", help="Zero-based page to read"),
    layout: str = typer.Option(AppConfig().layout_name, "--layout", help="Layout profile name"),
    tokens: bool = typer.Option(False, "--tokens", help="List tokens with anchor offsets"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Dump the raw text fragments of a page, for calibrating offset tables."""
    _setup_logging(verbose)
    config, profile = _resolve_config(layout, page)
    try:
        fragments = extract_fragments(
            read_document(pdf, max_bytes=config.max_document_bytes),
            page_number=config.page_number,
        )
    except DocumentReadError as exc:
        err_console.print(
            f"[red]{escape(str(exc))}[/red] ({escape(exc.detail or '')})", soft_wrap=True
        )
        raise typer.Exit(code=1) from exc

    text = render_fragment_dump(fragments)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        console.print(f"Dump saved to [bold]{escape(str(output))}[/bold]", soft_wrap=True)
    else:
        typer.echo(text)

    if tokens:
        _print_token_table(tokenize(fragments), profile)


def _print_token_table(stream: List[str], profile: LayoutProfile) -> None:
    anchor = find_anchor(stream)
    if anchor is None:
        console.print("[yellow]No RENAVAM anchor found.[/yellow]")
    labels: Dict[int, str] = {offset: target.wire_name for target, offset in profile.offsets.items()}

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Index")
    table.add_column("Offset")
    table.add_column("Token")
    table.add_column("Field")
    for index, token in enumerate(stream):
        offset = None if anchor is None else index - anchor
        table.add_row(
            str(index),
            "" if offset is None else f"{offset:+d}",
            escape(token),
            labels.get(offset, "") if offset is not None else "",
        )
    console.print(table)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the HTTP extraction service."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting CRLV service on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
