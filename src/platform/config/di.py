"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.lending.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Database (event-loop-aware session factory)
    database = providers.Singleton(Database)

    # Read side uses short-lived sessions; commands go through the unit of work
    reservation_query_repo = providers.Singleton(
        ReservationQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()
