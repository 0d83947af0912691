"""
sqlite-viz DATABASE

Prints the tables, columns and foreign keys of a SQLite database as a
Graphviz digraph on stdout, e.g. ``sqlite-viz app.db | dot -Tsvg > app.svg``.
"""
from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from sqlite_viz.commands.visualize import run_visualize
from sqlite_viz.config import get_settings
from sqlite_viz.errors import ErrorChain, wrap_err
from sqlite_viz.logging_config import configure_logging

# error chains are printed unwrapped
err_console = Console(stderr=True, soft_wrap=True)

app = typer.Typer(
    name="sqlite-viz",
    add_completion=False,
    help="Render a SQLite database schema as a Graphviz DOT graph.",
)


@app.command()
def main(
    database: str = typer.Argument(..., help="Path to an SQLite database file"),
):
    """Print the schema of DATABASE as DOT."""
    try:
        with wrap_err("invalid configuration"):
            cfg = get_settings()
        configure_logging(cfg.log_level)
        dot = run_visualize(database)
    except ErrorChain as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(e.format())}", highlight=False)
        raise typer.Exit(code=1)
    typer.echo(dot, nl=False)


if __name__ == "__main__":
    app()
