# session_registry/cli/utils_cli.py
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from pydantic import ValidationError

from ..dependencies import SessionRegistry, build_session_registry
from ..sessions import SessionRecord, StoreResult


def load_seed_file(path: Path) -> List[SessionRecord]:
    """
    Read a JSON array of session objects.

    Each object needs ``user_id`` and ``date``; ``status`` and ``session_id``
    are optional.

    Raises:
        ValueError: If the file is missing, not JSON, or holds invalid sessions
    """
    if not path.exists():
        raise ValueError(f"Seed file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Seed file {path} is not valid JSON: {e}") from e
    if not isinstance(payload, list):
        raise ValueError(f"Seed file {path} must contain a JSON array of sessions.")

    records: List[SessionRecord] = []
    for item in payload:
        if not isinstance(item, dict):
            raise ValueError(f"Seed file {path} contains a non-object entry: {item!r}")
        try:
            records.append(SessionRecord.open(**item))
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Seed file {path} contains an invalid session {item!r}: {e}") from e
    return records


def open_registry(seed_path: Optional[Path]) -> SessionRegistry:
    """Build the registry for this CLI run and load the seed sessions into it."""
    # Import here so tests can patch the configured default
    from .config import SESSION_REGISTRY_SEED_FILE

    registry = build_session_registry()
    path = seed_path or (Path(SESSION_REGISTRY_SEED_FILE) if SESSION_REGISTRY_SEED_FILE else None)
    if path is None:
        return registry

    try:
        records = load_seed_file(path)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    for record in records:
        result = registry.store.insert(record)
        if not result.ok:
            typer.secho(f"CLI: Skipping seed entry: {result.message}", fg=typer.colors.YELLOW)
    typer.echo(f"CLI: Loaded {len(registry.store)} session(s) from {path}")
    return registry


def record_as_dict(record: SessionRecord) -> Dict[str, Any]:
    return record.model_dump(mode="json")


def echo_records(records: List[SessionRecord]) -> None:
    typer.echo(json.dumps([record_as_dict(r) for r in records], indent=2))


def exit_on_failure(result: StoreResult) -> SessionRecord:
    """Print a failed store result in red and exit 1; return the record otherwise."""
    if not result.ok or result.value is None:
        typer.secho(
            f"Error ({result.error.value if result.error else 'unknown'}): {result.message}",
            fg=typer.colors.RED,
        )
        raise typer.Exit(code=1)
    return result.value
