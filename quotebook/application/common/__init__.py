"""Application layer common components."""

from quotebook.application.common.unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
