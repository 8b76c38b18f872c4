"""SQLAlchemy implementation of the UnitOfWork port."""

from sqlalchemy.orm import Session

from quotebook.application.common.unit_of_work import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work bound to the request's database session.

    Repositories only flush; nothing is persisted until commit().
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
