"""CLI interface for the legal chat assistant."""

import json
import os
from datetime import date
from pathlib import Path

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ....core.domain import SubmissionOutcome
from ....core.services.context_assembler import build_context
from ....core.services.rank_classifier import classify, rank_label
from ...common.exception_handler import format_exception_json
from ...common.rejections import rejection_error

app = typer.Typer(
    name="legal-chat",
    help="Trợ lý pháp lý - ask questions against your own legal documents",
    add_completion=False,
)

console = Console(force_terminal=True, legacy_windows=False)

# Determine if we're in debug mode (shows full stack traces)
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"


def handle_cli_error(exc: Exception) -> None:
    """Display an error in the CLI.

    In debug mode, shows full JSON error details.
    In normal mode, shows a short message with the error code.

    Args:
        exc: The exception to handle.
    """
    error_data = format_exception_json(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, ensure_ascii=False),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
    else:
        error_msg = error_data["error"]["message"]
        error_code = error_data["error"].get("code", "UNKNOWN")
        console.print(f"\n[red]Error [{error_code}]:[/] {error_msg}")
        console.print("[dim]Set DEBUG=true for full details[/]")


def _parse_date(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {value!r}") from exc


def _get_library():
    from ....composition.container import get_library

    return get_library()


def _get_session():
    from ....composition.container import get_session

    return get_session()


def _print_outcome(outcome: SubmissionOutcome) -> bool:
    """Render a submission result; returns False when nothing was answered."""
    if not outcome.accepted:
        handle_cli_error(rejection_error(outcome.reason))
        return False

    reply = outcome.reply
    if reply.failed:
        console.print(Panel(reply.text, title="[bold red]Lỗi[/]", border_style="red"))
        return False

    console.print(
        Panel(Markdown(reply.text), title="[bold blue]Trợ lý pháp lý[/]", border_style="blue")
    )
    return True


@app.command()
def add(
    files: list[Path] = typer.Argument(..., exists=True, dir_okay=False, help="Files to import"),
    effective_date: str | None = typer.Option(
        None, "--effective-date", "-d", help="Effective date (YYYY-MM-DD), defaults to today"
    ),
) -> None:
    """Import documents; a file with an existing name replaces the old version."""
    effective = _parse_date(effective_date)
    library = _get_library()

    with console.status("[bold green]Đang đọc tài liệu...[/]"):
        results = library.add_files(((path.name, path.read_bytes()) for path in files), effective)

    failures = 0
    for result in results:
        if result.ok:
            rank = classify(result.document.name)
            label = rank_label(rank)
            console.print(f"[green]✓[/] {result.name} [dim]({label}, id={result.document.id})[/]")
        else:
            failures += 1
            console.print(f"[red]✗[/] {result.name}: {result.error.message}")

    if failures:
        raise typer.Exit(1)


@app.command()
def remove(document_id: str = typer.Argument(..., help="Document id shown by 'list'")) -> None:
    """Remove a document from the library."""
    if _get_library().remove(document_id):
        console.print(f"[green]Removed {document_id}[/]")
    else:
        console.print(f"[yellow]No document with id {document_id}[/]")


@app.command("list")
def list_documents() -> None:
    """List documents in legal priority order."""
    documents = _get_library().documents()
    if not documents:
        console.print("[yellow]Chưa có tài liệu nào. Use 'legal-chat add FILE...' first.[/]")
        return

    table = Table(title="Kho Tài Liệu")
    table.add_column("#", justify="right")
    table.add_column("Rank", justify="right")
    table.add_column("Loại")
    table.add_column("Tên")
    table.add_column("Hiệu lực")
    table.add_column("Id", style="dim")

    for index, doc in enumerate(documents, start=1):
        rank = classify(doc.name)
        table.add_row(
            str(index),
            str(rank),
            rank_label(rank),
            doc.name,
            doc.effective_date.isoformat(),
            doc.id,
        )
    console.print(table)


@app.command("classify")
def classify_names(names: list[str] = typer.Argument(..., help="Document names")) -> None:
    """Show the legal rank a document name would receive."""
    for name in names:
        rank = classify(name)
        console.print(f"{rank:>3}  {rank_label(rank):<22} {name}")


@app.command()
def context() -> None:
    """Print the context block that would be sent to the model."""
    console.print(build_context(_get_library().repository.list()), markup=False, highlight=False)


@app.command()
def ask(question: str = typer.Argument(..., help="Question about the loaded documents")) -> None:
    """Ask a single question and get an answer."""
    try:
        session = _get_session()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    with console.status("[bold green]Đang phân tích...[/]"):
        outcome = session.submit(question)

    if not _print_outcome(outcome):
        raise typer.Exit(1)


@app.command()
def chat() -> None:
    """Start an interactive chat session."""
    console.print(
        Panel.fit(
            "[bold blue]⚖️  Trợ lý pháp lý[/]\n"
            "[dim]Answers are grounded in the documents you imported[/]\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Legal Chat",
            border_style="blue",
        )
    )

    try:
        session = _get_session()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    while True:
        try:
            question = Prompt.ask("\n[bold cyan]Bạn[/]")

            if question.lower() in ("quit", "exit", "q"):
                console.print("[dim]Tạm biệt![/]")
                break

            if not question.strip():
                continue

            with console.status("[bold green]Đang phân tích...[/]"):
                outcome = session.submit(question)
            _print_outcome(outcome)

        except KeyboardInterrupt:
            console.print("\n[dim]Tạm biệt![/]")
            break


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Port"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("legal_chat.adapters.inbound.api.main:app", host=host, port=port)


def main() -> None:
    from ....config import settings, setup_logging

    setup_logging(settings.log_level, log_file=settings.log_file, json_format=settings.log_json)
    app()
