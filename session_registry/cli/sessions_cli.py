# session_registry/cli/sessions_cli.py
import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..errors import SessionAlreadyExistsError, StoreErrorKind
from ..sessions import SessionStatus
from .utils_cli import echo_records, exit_on_failure, open_registry, record_as_dict

app = typer.Typer(
    name="sessions",
    help="Inspect and edit user sessions in a seeded in-memory store.",
    no_args_is_help=True
)

SeedOption = Annotated[
    Optional[Path],
    typer.Option(
        "--seed",
        help="JSON file with sessions to load first. Defaults to SESSION_REGISTRY_SEED_FILE."
    )
]


@app.command("dump")
def dump_sessions(seed: SeedOption = None):
    """Print every stored session in key order."""
    registry = open_registry(seed)
    listing = registry.store.dump()
    if not listing:
        typer.secho("No sessions stored.", fg=typer.colors.YELLOW)
        return
    typer.echo(listing)


@app.command("find")
def find_session(
    session_id: Annotated[str, typer.Argument(help="Session id (user id + '#' + date).")],
    seed: SeedOption = None
):
    """Look up one session by id."""
    registry = open_registry(seed)
    record = registry.store.find(session_id)
    if record is None:
        typer.secho(f"Session '{session_id}' not found.", fg=typer.colors.YELLOW)
        return
    typer.echo(json.dumps(record_as_dict(record), indent=2))


@app.command("find-all")
def find_user_sessions(
    user_id: Annotated[str, typer.Argument(help="User whose sessions to list.")],
    seed: SeedOption = None
):
    """List every session of one user."""
    registry = open_registry(seed)
    records = registry.store.find_all(user_id)
    if not records:
        typer.secho(f"No sessions found for user '{user_id}'.", fg=typer.colors.YELLOW)
        return
    echo_records(records)


@app.command("open")
def open_session(
    user_id: Annotated[str, typer.Argument(help="User opening the session.")],
    date: Annotated[
        Optional[str],
        typer.Option("--date", help="Session date. Defaults to today.")
    ] = None,
    status: Annotated[
        SessionStatus,
        typer.Option("--status", help="Initial status.")
    ] = SessionStatus.ACTIVE,
    seed: SeedOption = None
):
    """Insert a new session, then print the store."""
    registry = open_registry(seed)
    try:
        stored = registry.manager.open_session(user_id, date=date, status=status)
    except SessionAlreadyExistsError as e:
        typer.secho(f"Error ({e.kind.value}): {e.detail}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.secho(f"Session '{stored.session_id}' opened.", fg=typer.colors.GREEN)
    typer.echo(registry.store.dump())


@app.command("delete")
def delete_session(
    session_id: Annotated[str, typer.Argument(help="Session id to delete.")],
    seed: SeedOption = None
):
    """Remove a session and print what was removed."""
    registry = open_registry(seed)
    removed = exit_on_failure(registry.store.delete(session_id))
    typer.secho(f"Session '{removed.session_id}' deleted.", fg=typer.colors.GREEN)
    typer.echo(json.dumps(record_as_dict(removed), indent=2))


@app.command("update")
def update_session(
    session_id: Annotated[str, typer.Argument(help="Session id to update.")],
    new_user: Annotated[
        Optional[str],
        typer.Option("--user", help="New user id.")
    ] = None,
    new_date: Annotated[
        Optional[str],
        typer.Option("--date", help="New date.")
    ] = None,
    new_status: Annotated[
        Optional[SessionStatus],
        typer.Option("--status", help="New status.")
    ] = None,
    seed: SeedOption = None
):
    """Update a stored session. Only provided fields change."""
    changes = {}

    # Build changes with only the fields that need to be updated
    if new_user is not None:
        changes["user_id"] = new_user
    if new_date is not None:
        changes["date"] = new_date
    if new_status is not None:
        changes["status"] = new_status

    if not changes:
        typer.echo("No update parameters provided. Nothing to do.")
        raise typer.Exit()

    registry = open_registry(seed)
    current = registry.store.find(session_id)
    if current is None:
        typer.secho(
            f"Error ({StoreErrorKind.NOT_FOUND.value}): Session '{session_id}' does not exist.",
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=1)

    # find-all locates a user's sessions by session id prefix
    if new_user is not None and not current.session_id.lower().startswith(new_user.lower()):
        typer.secho(
            f"Warning: user '{new_user}' is not the prefix of session id '{current.session_id}'; "
            f"find-all '{new_user}' will not return this session.",
            fg=typer.colors.YELLOW,
        )

    replacement = current.model_copy(update=changes)
    updated = exit_on_failure(registry.store.update(replacement))
    typer.secho(f"Session '{updated.session_id}' updated.", fg=typer.colors.GREEN)
    typer.echo(json.dumps(record_as_dict(updated), indent=2))
