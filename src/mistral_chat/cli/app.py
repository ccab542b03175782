"""Main CLI application using Typer."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..chat import ChatSession, Transcript, load_transcript, save_transcript
from ..exceptions import MistralChatError
from ..help import DOCUMENTATION_URL, HELP_TOPICS, get_help_topic
from ..logging_config import configure_logging
from ..settings import ModelType
from .providers import get_session, get_settings_provider

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="mistral-chat",
    help="Chat with Mistral AI models from the terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

EXIT_WORDS = ("exit", "quit", "q")


def _settings_file(ctx: typer.Context) -> Path | None:
    return (ctx.obj or {}).get("settings_file")


@app.callback()
def main_callback(
    ctx: typer.Context,
    settings_file: Optional[Path] = typer.Option(
        None,
        "--settings-file",
        envvar="MISTRAL_CHAT_SETTINGS",
        help="Settings file (default: ~/.mistral_chat/settings.json)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose debug logging"
    ),
):
    """Chat with Mistral AI models from the terminal."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"settings_file": settings_file}


@app.command()
def configure(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(None, "--api-key", "-k", help="Mistral API key"),
    api_url: Optional[str] = typer.Option(None, "--api-url", "-u", help="Chat completions endpoint URL"),
    model: Optional[ModelType] = typer.Option(None, "--model", "-m", help="Model to use"),
):
    """Create or update the stored API settings."""
    settings = get_settings_provider(_settings_file(ctx))

    if api_key is None and api_url is None and model is None:
        api_key = typer.prompt("API key", hide_input=True)

    try:
        updated = settings.update(api_key=api_key, api_url=api_url, model=model)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    console.print("[green]Settings saved.[/green]")
    _print_settings_table(updated.masked_api_key, updated.api_url, updated.model)


@app.command()
def config(ctx: typer.Context):
    """Show the resolved API settings."""
    settings = get_settings_provider(_settings_file(ctx))
    record = settings.get_settings()

    if record is None:
        console.print("[yellow]No settings record found; defaults are in use.[/yellow]")
        console.print("[dim]Create one with: mistral-chat configure[/dim]")

    masked = record.masked_api_key if record is not None else ""
    _print_settings_table(masked, settings.get_api_url(), settings.get_model())


def _print_settings_table(masked_key: str, api_url: str, model: ModelType) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="bold cyan", width=10)
    table.add_column("Value")

    table.add_row("API Key", masked_key or "[yellow]NOT SET[/yellow]")
    table.add_row("API URL", api_url or "[yellow]NOT SET[/yellow]")
    table.add_row("Model", model.value)

    console.print(table)


@app.command()
def ask(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Message to send"),
    model: Optional[ModelType] = typer.Option(None, "--model", "-m", help="Model to use for this request"),
    api_key: Optional[str] = typer.Option(None, "--api-key", "-k", envvar="MISTRAL_API_KEY", help="API key to use"),
    timeout: float = typer.Option(30.0, "--timeout", "-t", help="Request timeout in seconds"),
):
    """Send a single message and print the reply."""
    api_key = api_key or None

    async def _ask():
        session = get_session(_settings_file(ctx), timeout=timeout, api_key=api_key, console=console)
        async with session:
            try:
                result = await session.send_message(text, api_key=api_key, model=model)
            except MistralChatError as e:
                console.print(f"[red]Error: {e}[/red]")
                raise typer.Exit(code=1)

        if result is None:
            console.print("[yellow]Nothing to send.[/yellow]")
            raise typer.Exit(code=1)

        reply = session.transcript.last()
        if result.ok:
            console.print(escape(result.content))
        else:
            console.print(f"[red]{escape(reply.content if reply else '')}[/red]")
            if result.error:
                console.print(f"[dim]{escape(result.error)}[/dim]")
            raise typer.Exit(code=1)

    asyncio.run(_ask())


@app.command()
def chat(
    ctx: typer.Context,
    history: Optional[Path] = typer.Option(
        None,
        "--history",
        "-H",
        help="Transcript file to load at start and save on exit"
    ),
    no_record_user: bool = typer.Option(
        False,
        "--no-record-user",
        help="Send user turns without adding them to the transcript"
    ),
    model: Optional[ModelType] = typer.Option(None, "--model", "-m", help="Model to use"),
    api_key: Optional[str] = typer.Option(None, "--api-key", "-k", envvar="MISTRAL_API_KEY", help="API key to use"),
    timeout: float = typer.Option(30.0, "--timeout", "-t", help="Request timeout in seconds"),
):
    """Interactive chat mode."""
    api_key = api_key or None

    async def _chat():
        session = get_session(_settings_file(ctx), timeout=timeout, api_key=api_key, console=console)

        if history is not None:
            try:
                loaded = load_transcript(session.transcript, history)
            except (OSError, ValueError) as e:
                console.print(
                    f"[red]Error: could not load history from {escape(str(history))}: {escape(str(e))}[/red]"
                )
                raise typer.Exit(code=1)
            if loaded:
                console.print(f"[dim]Loaded {session.transcript.count()} messages from {history}[/dim]")

        console.print("[bold cyan]Mistral Chat[/bold cyan]")
        console.print("[dim]Type '/help' for commands, 'exit', 'quit', or 'q' to leave[/dim]\n")

        async with session:
            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ").strip()
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input:
                    continue

                if user_input.lower() in EXIT_WORDS:
                    console.print("[dim]Goodbye![/dim]")
                    break

                if user_input.startswith("/"):
                    _run_chat_command(session, user_input)
                    continue

                try:
                    result = await session.send_message(
                        user_input,
                        record_user_turn=not no_record_user,
                        api_key=api_key,
                        model=model,
                    )
                except MistralChatError as e:
                    console.print(f"[red]Error: {e}[/red]")
                    continue

                reply = session.transcript.last()
                if result is not None and result.ok:
                    console.print(f"[bold green]Mistral:[/bold green] {escape(result.content)}\n")
                elif reply is not None:
                    console.print(f"[bold red]Mistral:[/bold red] {escape(reply.content)}\n")

        if history is not None:
            save_transcript(session.transcript, history)
            console.print(f"[dim]History saved to {history}[/dim]")

    asyncio.run(_chat())


CHAT_COMMANDS = {
    "/history": "Show the conversation so far",
    "/clear": "Clear the conversation",
    "/search TERM": "Find messages containing TERM",
    "/stats": "Show message counts and dialog duration",
    "/save FILE": "Save the conversation as JSON",
    "/load FILE": "Replace the conversation with a saved one",
    "/export": "Print the conversation as markdown",
    "/help": "Show this list",
}


def _run_chat_command(session: ChatSession, line: str) -> None:
    """Execute a slash command typed in the chat loop."""
    command, _, arg = line.partition(" ")
    arg = arg.strip()
    transcript = session.transcript

    if command == "/history":
        console.print(escape(transcript.format_history()) or "[dim]No messages yet.[/dim]")
    elif command == "/clear":
        transcript.clear()
        console.print("[dim]History cleared.[/dim]")
    elif command == "/search":
        if not arg:
            console.print("[yellow]Usage: /search TERM[/yellow]")
            return
        matches = transcript.search(arg)
        for message in matches:
            console.print(f"[cyan]{escape(message.role)}:[/cyan] {escape(message.content)}")
        console.print(f"[dim]{len(matches)} match(es)[/dim]")
    elif command == "/stats":
        _print_stats(transcript)
    elif command in ("/save", "/load"):
        if not arg:
            console.print(f"[yellow]Usage: {command} FILE[/yellow]")
            return
        try:
            if command == "/save":
                path = save_transcript(transcript, Path(arg))
                console.print(f"[green]Saved {transcript.count()} messages to {path}[/green]")
            elif load_transcript(transcript, Path(arg)):
                console.print(f"[green]Loaded {transcript.count()} messages from {arg}[/green]")
            else:
                console.print(f"[yellow]File not found: {arg}[/yellow]")
        except (OSError, ValueError) as e:
            console.print(f"[red]Error: {e}[/red]")
    elif command == "/export":
        console.print(escape(transcript.to_markdown()))
    elif command == "/help":
        for name, description in CHAT_COMMANDS.items():
            console.print(f"[cyan]{name}[/cyan]  {description}")
    else:
        console.print(f"[yellow]Unknown command: {escape(command)}. Type /help.[/yellow]")


def _print_stats(transcript: Transcript) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("Metric", style="bold cyan", width=15)
    table.add_column("Value")

    table.add_row("Messages", str(transcript.count()))
    for role, count in transcript.count_by_role().items():
        table.add_row(f"  {role}", str(count))
    table.add_row("Dialog Time", f"{transcript.dialog_duration():.1f}s")

    console.print(table)


@app.command()
def export(
    path: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="Transcript file written by 'chat --history' or '/save'"
    ),
):
    """Print a saved transcript as markdown."""
    transcript = Transcript()
    try:
        load_transcript(transcript, path)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    console.print(escape(transcript.to_markdown()))


@app.command(name="help-topic")
def help_topic(
    topic: str = typer.Argument(..., help=f"One of: {', '.join(HELP_TOPICS)}"),
    open_url: bool = typer.Option(False, "--open", "-o", help="Open the related page in a browser"),
):
    """Explain how to obtain and choose the API settings."""
    try:
        entry = get_help_topic(topic)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    body = "\n\n".join(entry.paragraphs) + f"\n\n[dim]{entry.url}[/dim]"
    console.print(Panel(body, title=entry.title, border_style="cyan"))

    if open_url:
        typer.launch(entry.url)


@app.command()
def docs():
    """Open the Mistral AI documentation in a browser."""
    console.print(f"[dim]Opening {DOCUMENTATION_URL}[/dim]")
    typer.launch(DOCUMENTATION_URL)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
