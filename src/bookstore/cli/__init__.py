"""Main CLI application module."""

import random
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.table import Table

from bookstore.api.utils.app_startup import configure_logging
from bookstore.core.services import BookService, DbSessionService
from bookstore.core.storage import InMemoryBookRepository, SqlBookRepository
from bookstore.entities.book import Book
from bookstore.runtime.context import get_config
from bookstore.runtime.init_db import init_db, seed_catalog

console = Console()

app = typer.Typer(
    help="📚 Bookstore CLI - serve the API and work with the catalog",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def setup() -> None:
    """Configure logging before any command runs."""
    configure_logging()


@contextmanager
def open_book_service(seed: int | None = None) -> Iterator[BookService]:
    """Yield a book service over the configured storage backend."""
    config = get_config()
    rng = random.Random(seed if seed is not None else config.recommendation.seed)

    if config.storage.backend == "memory":
        repository = InMemoryBookRepository()
        if config.storage.seed_sample_data:
            seed_catalog(repository)
        yield BookService(repository, rng=rng)
        return

    database_service = DbSessionService(config)
    init_db(database_service, config)
    try:
        with database_service.session_scope() as session:
            yield BookService(SqlBookRepository(session), rng=rng)
    finally:
        database_service.dispose()


def render_books(books: list[Book], title: str = "Books") -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Genre", style="magenta")
    table.add_column("ISBN")
    table.add_column("Year", justify="right")
    for book in books:
        table.add_row(
            str(book.id),
            book.title,
            book.author,
            book.genre,
            book.isbn or "-",
            str(book.published_year) if book.published_year is not None else "-",
        )
    return table


@app.command()
def serve(
    host: str = typer.Option(None, help="Host to bind the server to"),
    port: int = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    🚀 Start the Bookstore API server.
    """
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port
    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    uvicorn.run(
        "bookstore.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=config.logging.level.lower(),
    )


@app.command(name="init-db")
def init_db_command() -> None:
    """
    🗄️  Create the book tables and seed the sample catalog.
    """
    config = get_config()
    database_service = DbSessionService(config)
    try:
        init_db(database_service, config)
    finally:
        database_service.dispose()
    console.print(f"[green]✅ Database ready at {config.database.url}[/green]")


@app.command(name="list")
def list_books(
    genre: str = typer.Option(None, "--genre", "-g", help="Only books of this genre"),
) -> None:
    """
    📖 List books in the catalog.
    """
    with open_book_service() as service:
        books = service.get_books_by_genre(genre) if genre else service.get_all_books()
    if not books:
        console.print("[yellow]No books found[/yellow]")
        return
    console.print(render_books(books))


@app.command()
def recommend(
    genre: str = typer.Option(None, "--genre", "-g", help="Recommend from this genre"),
    seed: int = typer.Option(None, help="Seed for a reproducible pick"),
) -> None:
    """
    🎲 Recommend a random book.
    """
    with open_book_service(seed=seed) as service:
        book = service.get_recommendation(genre)
    if book is None:
        console.print("[red]❌ No book to recommend[/red]")
        raise typer.Exit(1)
    console.print(render_books([book], title="Recommendation"))


@app.command()
def add(
    title: str = typer.Option(..., help="Book title"),
    author: str = typer.Option(..., help="Book author"),
    genre: str = typer.Option(..., help="Book genre"),
    isbn: str = typer.Option(None, help="ISBN"),
    year: int = typer.Option(None, help="Publication year"),
) -> None:
    """
    ➕ Add a book to the catalog.
    """
    book = Book(
        title=title, author=author, genre=genre, isbn=isbn, published_year=year
    )
    if not book.has_required_fields():
        console.print("[red]❌ Title, author and genre must not be blank[/red]")
        raise typer.Exit(1)
    if get_config().storage.backend == "memory":
        console.print(
            "[yellow]⚠️  Memory storage: the book is kept only for this command. "
            "Set STORAGE_BACKEND=database to persist it.[/yellow]"
        )
    with open_book_service() as service:
        saved = service.add_book(book)
    console.print(f"[green]✅ Added book {saved.id}: {saved.title}[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
