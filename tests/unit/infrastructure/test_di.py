"""Tests for request-scoped use case resolution."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from dependency_injector import providers
from sqlalchemy.orm import Session

from quotebook.core import container
from quotebook.infrastructure.common.di import inject_use_case


def _sessions_seen(use_case) -> list[Session]:
    return [
        use_case.uow.session,
        use_case.entry_repository.db,
        use_case.quote_repository.db,
        use_case.authorization_guard.entry_repository.db,
        use_case.authorization_guard.quote_repository.db,
    ]


def test_use_case_is_bound_to_the_given_session() -> None:
    db = Session()

    use_case = inject_use_case(container.quote_ledger_use_case)(db)

    assert all(seen is db for seen in _sessions_seen(use_case))


def test_concurrent_resolution_never_mixes_sessions() -> None:
    resolve = inject_use_case(container.quote_ledger_use_case)

    def resolve_many(_worker: int) -> int:
        mismatches = 0
        for _ in range(200):
            db = Session()
            use_case = resolve(db)
            mismatches += sum(seen is not db for seen in _sessions_seen(use_case))
        return mismatches

    with ThreadPoolExecutor(max_workers=8) as pool:
        assert sum(pool.map(resolve_many, range(8))) == 0


def test_library_use_case_shares_one_session_across_collaborators() -> None:
    db = Session()

    use_case = inject_use_case(container.library_entry_use_case)(db)

    assert use_case.uow.session is db
    assert use_case.user_repository.db is db
    assert use_case.book_catalog.book_repository.db is db
    assert use_case.entry_repository.db is db


def test_unregistered_provider_is_rejected() -> None:
    with pytest.raises(ValueError):
        inject_use_case(providers.Factory(dict))
