"""Shared in-memory store for the in-memory repositories."""

from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass, field

from sqlalchemy.exc import IntegrityError

from cardiac.domain.model import ShareLog, User, Vote
from cardiac.domain.value import UserId

# Undo actions of the transaction running in the current task, if any
_undo_log: ContextVar[list[Callable[[], None]] | None] = ContextVar(
    "inmemory_undo_log", default=None
)


class ConstraintViolation(Exception):
    """Driver-level error carried by the store's IntegrityErrors."""

    def __init__(self, constraint_name: str) -> None:
        self.constraint_name = constraint_name
        super().__init__(
            f'duplicate key value violates unique constraint "{constraint_name}"'
        )


def unique_violation(statement: str, constraint_name: str) -> IntegrityError:
    """An IntegrityError shaped like the one Postgres raises."""
    return IntegrityError(statement, None, ConstraintViolation(constraint_name))


@dataclass
class InMemoryDatabase:
    """Rows of every table, shared by all in-memory repositories.

    One instance lives per container (APP scope), so data written in one
    request is visible to the next, as it would be with a real database.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    votes: list[Vote] = field(default_factory=list)
    share_logs: list[ShareLog] = field(default_factory=list)

    def on_rollback(self, undo: Callable[[], None]) -> None:
        """Register how to undo a write made inside the current transaction.

        Writes made outside a transaction are final.
        """
        undo_log = _undo_log.get()
        if undo_log is not None:
            undo_log.append(undo)

    def begin(self) -> tuple[list[Callable[[], None]], object]:
        undo_log: list[Callable[[], None]] = []
        return undo_log, _undo_log.set(undo_log)

    def end(self, undo_log: list[Callable[[], None]], token, rollback: bool) -> None:
        _undo_log.reset(token)
        if rollback:
            for undo in reversed(undo_log):
                undo()
            return
        # A committed nested block is undone with its parent
        outer = _undo_log.get()
        if outer is not None:
            outer.extend(undo_log)
