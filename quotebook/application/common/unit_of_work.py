"""
Unit of work port.

A unit of work bounds one business transaction: every change made by the
repositories inside it is committed together or not at all.

Example:
    class QuoteLedgerUseCase:
        def add_quote(self, user_id: int, entry_id: UUID, text: str) -> Quote:
            with self.uow:
                entry = self.authorization_guard.require_owned_entry(...)
                quote = self.quote_repository.add(Quote.create(entry.id, text))
                entry.touch()
                self.entry_repository.save(entry)
                self.uow.commit()
                return quote
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Transaction boundary port.

    Implemented over a SQLAlchemy session in the infrastructure layer.
    Leaving the block without commit() keeps nothing; leaving it with an
    exception rolls back explicitly.
    """

    @abstractmethod
    def commit(self) -> None:
        """Make every change since the block was entered durable."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard every change made within the unit of work."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
