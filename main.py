from contextlib import ExitStack
from pathlib import Path
from typing import Optional
from replacer import DEFAULT_CHUNK_SIZE, InvalidIdentifierError, StreamReplacer, build_pattern_table
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
import logging, typer

app = typer.Typer()
console = Console()
err_console = Console(stderr=True)
log = logging.getLogger(__name__)

def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )

def fail(message: str):
    err_console.print(f"[red]{message}[/]")
    raise typer.Exit(code=1)

def pattern_table_view(table) -> Table:
    view = Table()
    view.add_column("Convention")
    view.add_column("Search")
    view.add_column("Replacement")

    for label, old, new in table.rows():
        view.add_row(label, old, new)

    return view

def summary_view(replacer: StreamReplacer, table) -> Table:
    targets = dict(reversed(list(zip(table.patterns, table.replacements))))
    view = Table()
    view.add_column("Found")
    view.add_column("Replaced with")
    view.add_column("Count", justify="right")

    for old, count in replacer.replacements_made.most_common():
        view.add_row(old, targets[old], str(count))

    return view

@app.command()
def casesub(
    search: str,
    replacement: str,
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="Read from this file instead of stdin"),
    output_file: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file instead of stdout"),
    dry: bool = typer.Option(False, help="Print the spellings that would be replaced and exit"),
    summary: bool = typer.Option(False, help="Print what was replaced to stderr when done"),
    chunk_size: int = typer.Option(DEFAULT_CHUNK_SIZE, min=1, envvar="CASESUB_CHUNK_SIZE", help="Bytes read at a time"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug information to stderr"),
):
    """
    Replace SEARCH with REPLACEMENT in a stream, in every case convention:\n
    \n
        SEARCH = fooBar | REPLACEMENT = bazQux\n
    \n
    Will replace:\n
    \n
        fooBar -> bazQux\n
        FooBar -> BazQux\n
        foo_bar -> baz_qux\n
        foo-bar -> baz-qux\n
        Foo_Bar -> Baz_Qux\n
        FOO_BAR -> BAZ_QUX\n
    \n
    Exits with code 1 without reading the stream when SEARCH and REPLACEMENT are equal.
    """
    setup_logging(verbose)

    if search == replacement:
        fail("Search and replacement are the same. No actions will be taken.")

    try:
        table = build_pattern_table(search, replacement)
    except InvalidIdentifierError as e:
        fail(str(e))

    if dry:
        console.print(pattern_table_view(table))
        raise typer.Exit()

    replacer = StreamReplacer(table, chunk_size)

    try:
        with ExitStack() as stack:
            source = stack.enter_context(open(input_file, "rb")) if input_file else typer.get_binary_stream('stdin')
            sink = stack.enter_context(open(output_file, "wb")) if output_file else typer.get_binary_stream('stdout')
            total = replacer.replace_stream(source, sink)

    except OSError as e:
        fail(f"I/O failed: {e}")

    log.info("Made %d replacements", total)

    if summary:
        err_console.print(summary_view(replacer, table))

if __name__ == "__main__":
    app()
