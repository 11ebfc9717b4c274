"""Command-line interface for variantpos."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from variantpos import __version__
from variantpos.core.chess import Position, PositionError, available_variants, initial_fen, to_960_uci

app = typer.Typer(
    name="variantpos",
    help="variantpos: chess-variant positions and notation",
    add_completion=False,
)
console = Console()


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]variantpos[/bold blue] v{__version__}")


@app.command()
def variants() -> None:
    """List registered variants with their initial FEN."""
    table = Table(title="Available Variants")
    table.add_column("Variant Name", style="cyan")
    table.add_column("Initial FEN")
    for name in available_variants():
        table.add_row(name, escape(initial_fen(name)))
    console.print(table)


@app.command()
def fen(
    variant: str = typer.Argument(..., help="Variant name"),
    moves: list[str] | None = typer.Argument(None, help="Moves in UCI notation"),
    start: str | None = typer.Option(None, "--fen", "-f", help="Starting FEN"),
    chess960: bool = typer.Option(False, "--chess960", help="Use Chess960 castling notation"),
) -> None:
    """Print the FEN reached after playing MOVES."""
    try:
        position = Position(variant, start, is_chess960=chess960).make_moves(moves or [])
    except PositionError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    console.print(position.get_fen(), markup=False, highlight=False)


@app.command()
def to960(
    variant: str = typer.Argument(..., help="Variant name"),
    moves: list[str] = typer.Argument(..., help="Moves in UCI notation"),
) -> None:
    """Rewrite castling moves into Chess960 notation."""
    try:
        translated = to_960_uci(variant, moves)
    except PositionError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    console.print(" ".join(translated), markup=False, highlight=False)


if __name__ == "__main__":
    app()
