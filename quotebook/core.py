from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from quotebook.application.library.services.authorization_guard import AuthorizationGuard
from quotebook.application.library.use_cases.book_catalog_use_case import BookCatalogUseCase
from quotebook.application.library.use_cases.library_entry_use_case import LibraryEntryUseCase
from quotebook.application.reading.use_cases.quote_ledger_use_case import QuoteLedgerUseCase
from quotebook.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from quotebook.infrastructure.identity.repositories.user_repository import UserRepository
from quotebook.infrastructure.library.repositories import BookRepository, LibraryEntryRepository
from quotebook.infrastructure.reading.repositories import QuoteRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    unit_of_work = providers.Factory(SQLAlchemyUnitOfWork, session=db)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    book_repository = providers.Factory(BookRepository, db=db)
    library_entry_repository = providers.Factory(LibraryEntryRepository, db=db)
    quote_repository = providers.Factory(QuoteRepository, db=db)

    # Application services
    authorization_guard = providers.Factory(
        AuthorizationGuard,
        entry_repository=library_entry_repository,
        quote_repository=quote_repository,
    )

    # Library module, application use cases
    book_catalog_use_case = providers.Factory(
        BookCatalogUseCase,
        book_repository=book_repository,
    )

    library_entry_use_case = providers.Factory(
        LibraryEntryUseCase,
        user_repository=user_repository,
        book_repository=book_repository,
        entry_repository=library_entry_repository,
        quote_repository=quote_repository,
        book_catalog=book_catalog_use_case,
        authorization_guard=authorization_guard,
        uow=unit_of_work,
    )

    # Reading module, application use cases
    quote_ledger_use_case = providers.Factory(
        QuoteLedgerUseCase,
        entry_repository=library_entry_repository,
        quote_repository=quote_repository,
        authorization_guard=authorization_guard,
        uow=unit_of_work,
    )


# Initialize container
container = Container()
