"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.db_setting import Database
from src.service.appointment.driven_adapter.repo.sales_manager_query_repo_impl import (
    SalesManagerQueryRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Database (session factory per request, engine bound to the running loop)
    database = providers.Singleton(Database)

    # Repositories (stateless - open a session per call)
    sales_manager_query_repo = providers.Singleton(
        SalesManagerQueryRepoImpl, session_factory=database.provided.session
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
