"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text

from writing_assistant.clients.chat_client import ChatClient
from writing_assistant.config import API_KEY_ENV_VARS, AppConfig, load_config, resolve_api_key
from writing_assistant.logging.cost_calculator import build_usage_report
from writing_assistant.models.options import TONE_LABELS, TRANSLATE_LANGUAGES, Action, Tone
from writing_assistant.models.state import RequestState
from writing_assistant.pipeline.orchestrator import RequestOrchestrator

app = typer.Typer(
    name="writing-assistant",
    help="ChatGPT writing assistant: rewrite, summarize and translate text",
    no_args_is_help=True,
)
console = Console()

PROGRESS_LABELS = {
    Action.REWRITE: "Rewriting...",
    Action.SUMMARIZE: "Summarizing...",
    Action.TRANSLATE: "Translating...",
}


def _read_input(text: str | None, file: Path | None) -> str:
    """Input comes from --file, from stdin when TEXT is '-', or from TEXT itself."""
    if file is not None:
        if not file.exists():
            console.print(f"[red]Input file not found: {file}[/red]")
            raise typer.Exit(1)
        return file.read_text(encoding="utf-8")
    if text == "-":
        return sys.stdin.read()
    return text or ""


def _build_client(config: AppConfig) -> ChatClient:
    api_key = resolve_api_key()
    if not api_key:
        console.print(f"[red]No API key found. Set {' or '.join(API_KEY_ENV_VARS)} (a .env file works).[/red]")
        raise typer.Exit(1)
    return ChatClient(
        api_key,
        api_url=config.chat.api_url,
        model=config.chat.model,
        max_tokens=config.chat.max_tokens,
        system_prompt=config.chat.system_prompt,
        timeout=config.chat.timeout,
        max_retries=config.chat.max_retries,
    )


def _run_action(
    action: Action,
    text: str | None,
    file: Path | None,
    *,
    tone: Tone = Tone.DEFAULT,
    lang: str | None = None,
    verbose: bool = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = load_config()
    state = RequestState(input_text=_read_input(text, file))
    if not state.can_submit:
        console.print("[red]Nothing to do: the input text is empty.[/red]")
        raise typer.Exit(1)
    if len(state.input_text) > config.ui.max_input_chars:
        console.print(
            f"[red]Input is {len(state.input_text)} characters; the limit is {config.ui.max_input_chars}.[/red]"
        )
        raise typer.Exit(1)

    client = _build_client(config)
    orchestrator = RequestOrchestrator(client)
    target_language = lang or config.ui.default_language

    if verbose:
        console.print(f"[dim]Model: {client.model}[/dim]")
        console.print(f"[dim]Input: {len(state.input_text)} chars[/dim]")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(PROGRESS_LABELS[action], total=None)
        state = asyncio.run(
            orchestrator.run(state, action, tone=tone, target_language=target_language)
        )

    if state.error:
        console.print(f"[red]{escape(state.error)}[/red]")
        raise typer.Exit(1)

    console.print(Panel(Text(state.output_text), title="Output"))

    if verbose:
        report = build_usage_report(client.get_token_summary()["calls"])
        console.print(
            f"[dim]Tokens: {report.input_tokens} in / {report.output_tokens} out, ~${report.cost_usd:.4f}[/dim]"
        )


TEXT_ARGUMENT_HELP = "Text to transform ('-' reads stdin)"


@app.command()
def rewrite(
    text: str = typer.Argument(None, help=TEXT_ARGUMENT_HELP),
    file: Path = typer.Option(None, "--file", "-f", help="Read the input text from a file"),
    tone: Tone = typer.Option(Tone.DEFAULT, "--tone", "-t", help="Rewrite tone"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs and token usage"),
) -> None:
    """Rewrite text, optionally in a given tone."""
    _run_action(Action.REWRITE, text, file, tone=tone, verbose=verbose)


@app.command()
def summarize(
    text: str = typer.Argument(None, help=TEXT_ARGUMENT_HELP),
    file: Path = typer.Option(None, "--file", "-f", help="Read the input text from a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs and token usage"),
) -> None:
    """Summarize text in 3-5 sentences."""
    _run_action(Action.SUMMARIZE, text, file, verbose=verbose)


@app.command()
def translate(
    text: str = typer.Argument(None, help=TEXT_ARGUMENT_HELP),
    file: Path = typer.Option(None, "--file", "-f", help="Read the input text from a file"),
    lang: str = typer.Option(None, "--lang", "-l", help="Target language code (default from config)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs and token usage"),
) -> None:
    """Translate text into another language."""
    _run_action(Action.TRANSLATE, text, file, lang=lang, verbose=verbose)


@app.command()
def options() -> None:
    """List available tones and translation languages."""
    tones = Table(title="Tones")
    tones.add_column("Value", style="cyan")
    tones.add_column("Label")
    for tone, label in TONE_LABELS.items():
        tones.add_row(tone.value, label)
    console.print(tones)

    languages = Table(title="Languages")
    languages.add_column("Code", style="cyan")
    languages.add_column("Name")
    for code, name in TRANSLATE_LANGUAGES.items():
        languages.add_row(code, name)
    console.print(languages)


if __name__ == "__main__":
    app()
