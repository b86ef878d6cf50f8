"""
Dependency injection container using dependency-injector.
Holds the process-wide health service; request-scoped controllers are
built per request from the database session.
"""

from dependency_injector import containers, providers

from app.core.config import settings
from app.services.health_service import HealthService
from app.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    config = providers.Configuration()

    # Services
    health_service = providers.Singleton(
        HealthService,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = Container()
        _container.config.from_dict({
            "database_url": settings.DATABASE_URL,
            "environment": settings.ENVIRONMENT,
        })
    return _container
