import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from . import configure_logger
from .errors import (
    InputError,
    InvalidQueryError,
    ParseError,
    UnsupportedLanguageError,
)
from .languages import language_for_path, supported_languages
from .services.inspector import Inspector, read_source

app = typer.Typer(
    help="Inspect tree-sitter syntax trees and the captures of tree-sitter queries",
    add_completion=False,
)


def _fail(message: str):
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def main(
    file: Optional[Path] = typer.Argument(None, help="Source file (stdin when omitted)"),
    lang: Optional[str] = typer.Option(
        None, "--lang", "-l", help="Language to parse (inferred from FILE if omitted)"
    ),
    query: Optional[str] = typer.Option(
        None, "--query", "-q", help="Tree-sitter query to execute"
    ),
    query_file: Optional[Path] = typer.Option(
        None, "--query-file", help="Read the query from a file"
    ),
    list_languages: bool = typer.Option(
        False, "--list-languages", help="Print supported languages and exit"
    ),
    log_level: str = typer.Option("WARNING", help="Diagnostic log level (stderr)"),
):
    """Print the syntax tree of a source file, or the matches of a query over it"""
    try:
        configure_logger(level=log_level.upper(), sink=sys.stderr)
    except ValueError as e:
        _fail(f"--log-level: {e}")

    if list_languages:
        for name in supported_languages():
            typer.echo(name)
        return

    if query is not None and query_file is not None:
        _fail("--query and --query-file are mutually exclusive")
    if query_file is not None:
        try:
            query = query_file.read_text()
        except OSError as e:
            _fail(f"reading query file: {e}")

    if not lang:
        lang = language_for_path(file) if file is not None else None
        if not lang:
            _fail("--lang is required")
        logger.info(f"Inferred language '{lang}' from {file}")

    try:
        with Inspector(lang) as inspector:
            source = read_source(file, typer.get_binary_stream("stdin"))
            if query:
                lines = inspector.run_query(source, query)
            else:
                lines = inspector.dump_tree(source)
            for line in lines:
                typer.echo(line)
    except UnsupportedLanguageError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Supported languages: {', '.join(e.supported)}", err=True)
        raise typer.Exit(code=1)
    except InputError as e:
        _fail(str(e))
    except ParseError as e:
        _fail(f"parsing code: {e}")
    except InvalidQueryError as e:
        _fail(f"executing query: {e}")
