# session_registry/cli/main_cli.py
import typer
from . import sessions_cli

# Main CLI application with help enabled when no arguments are provided
app = typer.Typer(
    name="session-registry",
    help="Session Registry Command Line Interface.",
    no_args_is_help=True
)

# Register session commands under 'sessions' subcommand
app.add_typer(sessions_cli.app, name="sessions")


@app.callback()
def main_callback():
    """
    Session Registry main CLI application.
    Use 'session-registry sessions --help' for session commands.
    """
    pass


def cli_entry_point():
    """Entry point function for console script registration in pyproject.toml"""
    app()


if __name__ == "__main__":
    cli_entry_point()
