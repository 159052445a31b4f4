from helpdesk.models.schemas.health import StorageHealth
from helpdesk.repositories.storage import KeyValueStorage


class HealthRepository:
    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    def check_connection(self) -> StorageHealth:
        connected, error_message = self.storage.ping()
        return StorageHealth(
            backend=self.storage.name,
            connected=connected,
            message=None if connected else error_message,
        )
