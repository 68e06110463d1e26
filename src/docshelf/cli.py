"""Command line interface for docshelf."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from docshelf.config import AppConfig
from docshelf.index.navigation import build_navigation
from docshelf.index.pager import neighbors
from docshelf.index.paths import all_slugs
from docshelf.index.resolver import resolve, slug_path
from docshelf.index.search import Searcher
from docshelf.index.store import DocumentIndex, load_documents_with_stats
from docshelf.models import Category, Document, Leaf

console = Console()
app = typer.Typer(help="docshelf - documentation site content engine")

ROOT_OPTION = typer.Option(None, "--root", "-r", help="Content root directory")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Verbose logging")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load(root: Optional[Path]) -> tuple[AppConfig, DocumentIndex]:
    config = AppConfig(content_root=root if root is not None else AppConfig().content_root)
    resolved_root = config.resolve_content_root(Path.cwd())
    if not resolved_root.is_dir():
        console.print(f"[yellow]Warning: content root not found: {resolved_root}[/yellow]")
    config.content_root = resolved_root
    index, stats = load_documents_with_stats(resolved_root, config=config)
    if stats.skipped or stats.duplicates:
        console.print(
            f"[yellow]Skipped {stats.skipped} unreadable and "
            f"{stats.duplicates} duplicate files.[/yellow]"
        )
    return config, index


def _add_nodes(branch: Tree, category: Category) -> None:
    for child in category.children:
        if isinstance(child, Leaf):
            branch.add(f"{child.title} [dim]/{child.slug}[/dim]")
        else:
            _add_nodes(branch.add(f"[bold]{child.title or child.name}[/bold]"), child)


@app.command()
def paths(
    root: Path = ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List every document path for static generation."""
    _setup_logging(verbose)
    _, index = _load(root)
    slugs = all_slugs(index)
    if not slugs:
        console.print("[yellow]No documents found.[/yellow]")
        return
    for segments in slugs:
        console.print("/" + "/".join(segments), highlight=False)


@app.command()
def show(
    slug: Optional[List[str]] = typer.Argument(None, help="Slug segments, e.g. guide setup"),
    root: Path = ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print a document's metadata and body."""
    _setup_logging(verbose)
    config, index = _load(root)
    document = resolve(index, slug, config=config)
    if not isinstance(document, Document):
        console.print(f"[yellow]Document not found: /{slug_path(slug, config=config)}[/yellow]")
        raise typer.Exit(code=1)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("slug", "/" + document.slug)
    table.add_row("source", str(document.source_path))
    for key, value in document.metadata.items():
        table.add_row(key, str(value))
    console.print(table)
    console.print(document.body, markup=False, highlight=False)


@app.command()
def nav(
    root: Path = ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the navigation tree."""
    _setup_logging(verbose)
    config, index = _load(root)
    tree = Tree("[bold]docs[/bold]")
    _add_nodes(tree, build_navigation(index, config=config))
    console.print(tree)


@app.command()
def pager(
    slug: str = typer.Argument("", help="Current document slug"),
    root: Path = ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show the previous and next documents around SLUG."""
    _setup_logging(verbose)
    config, index = _load(root)
    links = neighbors(build_navigation(index, config=config), slug.strip("/"))
    previous = f"{links.previous.title} (/{links.previous.slug})" if links.previous else "-"
    following = f"{links.next.title} (/{links.next.slug})" if links.next else "-"
    console.print(f"Previous: {previous}", highlight=False)
    console.print(f"Next: {following}", highlight=False)


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text"),
    top_k: int = typer.Option(10, help="Number of results to display"),
    root: Path = ROOT_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Search document titles and bodies."""
    _setup_logging(verbose)
    _, index = _load(root)
    top_k = max(1, min(top_k, 50))
    results = Searcher(index).search(query, top_k=top_k)
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Score")
    table.add_column("Document", no_wrap=True)
    table.add_column("Title")
    table.add_column("Snippet")
    for result in results:
        snippet = result.snippet.replace("\n", " ")
        table.add_row(f"{result.score:.4f}", "/" + result.slug, result.title, snippet[:180])
    console.print(table)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    root: Path = ROOT_OPTION,
) -> None:
    """Start the JSON API server."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install it with \"python -m pip install uvicorn\""
        ) from exc

    from docshelf.web.app import app as web_app, configure

    config = AppConfig(content_root=root if root is not None else AppConfig().content_root)
    resolved_root = config.resolve_content_root(Path.cwd())
    if not resolved_root.is_dir():
        console.print("[yellow]Warning: content root not found, every page will be 404.[/yellow]")
    config.content_root = resolved_root
    configure(config)

    console.print(f"Starting web interface on http://{host}:{port} (content: {resolved_root})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
