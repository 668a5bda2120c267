# session_registry/sessions/results.py
from typing import Optional
from pydantic import BaseModel

from ..errors import StoreErrorKind, error_for_kind
from .session_data import SessionRecord


class StoreResult(BaseModel):
    """
    Outcome of a store mutation: either a success carrying a record or a
    tagged failure. Callers branch on ``ok``/``error``; ``unwrap()`` converts
    a failure into the matching exception.
    """

    ok: bool
    value: Optional[SessionRecord] = None
    error: Optional[StoreErrorKind] = None
    session_id: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: SessionRecord) -> "StoreResult":
        return cls(ok=True, value=value, session_id=value.session_id)

    @classmethod
    def failure(
        cls, kind: StoreErrorKind, session_id: str, message: Optional[str] = None
    ) -> "StoreResult":
        return cls(ok=False, error=kind, session_id=session_id, message=message)

    def unwrap(self) -> SessionRecord:
        """Return the record or raise the store error this result represents."""
        if self.ok and self.value is not None:
            return self.value
        if self.error is None:
            raise RuntimeError("StoreResult has neither a value nor an error.")
        raise error_for_kind(self.error, self.session_id or "", self.message)
