"""
Student Registry CLI - Command-line interface.

Run the registration API from the terminal.
"""

from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel

from student_registry.config import get_settings
from student_registry.core.exceptions import ConfigurationError, format_exception

app = typer.Typer(
    name="student-registry",
    help="Student Registry - in-memory student registration service",
    no_args_is_help=True,
)
console = Console()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Bind host (default: SR_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default: SR_PORT)"),
    reload: bool = typer.Option(False, "--reload/--no-reload", help="Reload on code changes"),
):
    """Run the Student Registry API."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print(f"[red]{format_exception(e)}[/red]")
        raise typer.Exit(1)

    bind_host = host or settings.host
    bind_port = port or settings.port

    console.print(
        Panel.fit(
            f"[bold blue]Student Registry[/bold blue]\n"
            f"Listening on: http://{bind_host}:{bind_port}\n"
            f"Authentication: {'required' if settings.require_auth else '[yellow]disabled[/yellow]'}",
        )
    )

    uvicorn.run(
        "student_registry.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def version():
    """Show Student Registry version."""
    from student_registry import __version__

    console.print(f"Student Registry v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
