import pytest

from src.platform.config.di import Container, container
from src.platform.database.orm_db_setting import Database
from src.service.lending.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)


@pytest.mark.unit
class TestContainer:
    def test_only_resolved_providers_are_declared(self):
        assert set(Container.providers) == {'database', 'reservation_query_repo'}

    def test_query_repo_reads_through_database_sessions(self):
        try:
            repo = container.reservation_query_repo()

            assert isinstance(repo, ReservationQueryRepoImpl)
            assert isinstance(container.database(), Database)
            assert repo.session_factory == container.database().session
        finally:
            container.reservation_query_repo.reset()
            container.database.reset()
