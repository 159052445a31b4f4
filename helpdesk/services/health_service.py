from helpdesk.core.config import Settings
from helpdesk.models.schemas.health import HealthResponse
from helpdesk.repositories.health_repository import HealthRepository


class HealthService:
    def __init__(self, repository: HealthRepository, settings: Settings) -> None:
        self.repository = repository
        self.settings = settings

    def get_health(self) -> HealthResponse:
        storage_health = self.repository.check_connection()
        status = "ok" if storage_health.connected else "degraded"
        return HealthResponse(
            status=status,
            environment=self.settings.app_env,
            storage=storage_health,
        )
