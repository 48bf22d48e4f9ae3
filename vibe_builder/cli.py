"""
Vibe Builder - Command line interface

Usage:
    vibe                                   # Interactive mode
    vibe chat "/build-my-app a todo app"   # Single command
    vibe analyze "a sleek blog with login" # Show classification and plan
    vibe --help
"""

import asyncio
import json
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .app import create_router
from .config import Config
from .core import CommandRouter, load_classifier, plan_application
from .errors import ConfigurationError, VibeBuilderError
from .libraries import ComponentLibrary, DesignPatterns
from .models import CommandResult, ResultStatus
from .utils.logger import setup_logger

app = typer.Typer(add_completion=False, help="Turn your app vibe into a build plan")
console = Console()

STATUS_STYLES = {
    ResultStatus.SUCCESS: "green",
    ResultStatus.PARTIAL_SUCCESS: "yellow",
    ResultStatus.FAILURE: "red",
}


def print_welcome():
    welcome = """
# Welcome to Vibe Builder!

Describe the app you want, or use a slash command:
- "/build-my-app a simple todo list with user accounts"
- "/make-it-look-better"
- "/show-me-progress"
- "/help"
    """
    console.print(Panel(Markdown(welcome), border_style="cyan", title="Vibe Builder"))


def print_result(result: CommandResult):
    """Pretty print a command result."""
    style = STATUS_STYLES[result.status]
    console.print(f"\n[bold {style}]{result.message}[/bold {style}]")

    if "commands" in result.payload:
        print_commands_table(result.payload["commands"])
        return

    body = {k: v for k, v in result.payload.items() if k not in ("plan", "analysis")}
    console.print(Panel(
        Syntax(json.dumps(body, indent=2, default=str), "json", theme="monokai"),
        border_style=style,
    ))


def print_commands_table(commands):
    table = Table(title="Commands")
    table.add_column("Command", style="cyan")
    table.add_column("Triggers")
    table.add_column("Description")
    for command in commands:
        table.add_row(command["name"], ", ".join(command["triggers"]), command["description"])
    console.print(table)


def dispatch(router: CommandRouter, user_input: str, context: Dict[str, Any]) -> Optional[CommandResult]:
    try:
        return asyncio.run(router.route(user_input, context))
    except VibeBuilderError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return None


def build_router() -> CommandRouter:
    """Router over the built-in commands; configuration problems exit with code 1."""
    try:
        return create_router()
    except ConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
):
    """Vibe Builder - from vibe to specialist build plan."""
    try:
        Config.validate()
    except ConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    setup_logger("DEBUG" if verbose else None)
    if ctx.invoked_subcommand is None:
        chat(None, session="cli")


@app.command()
def chat(
    query: Optional[str] = typer.Argument(None, help="A slash command or free-text request"),
    session: str = typer.Option("cli", "--session", help="Session id passed to commands"),
):
    """
    Run one request, or start an interactive session.

    Examples:
        vibe chat "/build-my-app a blog with comments"
        vibe chat
    """
    router = build_router()
    context = {"session_id": session}

    if query:
        console.print(f"\n[bold]You:[/bold] {query}")
        result = dispatch(router, query, context)
        if result is None:
            raise typer.Exit(code=1)
        print_result(result)
        return

    print_welcome()
    console.print("\n[dim]Type 'quit' or 'exit' to leave[/dim]\n")

    while True:
        try:
            user_input = Prompt.ask("\n[bold cyan]You[/bold cyan]")

            if user_input.lower() in ["quit", "exit", "q"]:
                console.print("\n[bold]Goodbye![/bold]\n")
                break

            if not user_input.strip():
                continue

            result = dispatch(router, user_input, context)
            if result is not None:
                print_result(result)

        except KeyboardInterrupt:
            console.print("\n\n[bold]Goodbye![/bold]\n")
            break


@app.command()
def commands():
    """List every command and its triggers."""
    router = build_router()
    print_result(router.help())


@app.command()
def analyze(vibe: str = typer.Argument(..., help="Describe the app you want")):
    """Show how a vibe is classified and planned, without running specialists."""
    try:
        classifier = load_classifier(Config.RULES_FILE)
    except ConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
    analysis = classifier.analyze(vibe)
    plan = plan_application(analysis)

    table = Table(title="Vibe Analysis", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("App type", analysis.app_type)
    table.add_row("Features", ", ".join(analysis.features))
    table.add_row("Complexity", analysis.complexity)
    table.add_row("Urgency", analysis.urgency)
    table.add_row("Style", analysis.style)
    table.add_row("Timeline", plan.timeline)
    table.add_row("Architecture", "; ".join(plan.architecture.layers))
    console.print(table)

    console.print("\n[bold cyan]Specialist team:[/bold cyan]")
    for i, specialist in enumerate(plan.required_specialists, 1):
        console.print(f"  {i}. {specialist.name} ({specialist.agent_id}) - {specialist.task}")


@app.command()
def patterns(context: str = typer.Argument(..., help="e.g. 'fast mobile site'")):
    """Recommend design patterns for a context."""
    recommended = DesignPatterns().get_recommendations(context)
    if not recommended:
        console.print("[dim]No matching patterns[/dim]")
        return

    for pattern in recommended:
        console.print(Panel(
            Syntax(pattern.code.strip(), "html", theme="monokai"),
            title=pattern.name,
            subtitle=", ".join(pattern.principles),
            border_style="blue",
        ))


@app.command()
def components(category: Optional[str] = typer.Argument(None, help="Filter by category")):
    """List UI components, optionally filtered by category."""
    library = ComponentLibrary()
    found = library.find_by_category(category) if category else library.get_all()

    table = Table(title="Components")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Variants")
    for component in found:
        table.add_row(component.name, component.description, ", ".join(component.variants))
    console.print(table)


@app.command()
def info():
    """Show configuration."""
    console.print(f"\n[bold cyan]Vibe Builder v{__version__}[/bold cyan]\n")
    console.print(f"Log level: {Config.LOG_LEVEL}")
    console.print(f"Rules file: {Config.RULES_FILE or 'built-in'}")
    console.print(f"Specialist timeout: {Config.SPECIALIST_TIMEOUT or 'none'}")
    console.print(f"Derived step totals: {Config.DERIVE_TOTAL_STEPS}")
    console.print()


def run():
    app()


if __name__ == "__main__":
    run()
