from threading import Lock

from pydantic import ValidationError

from helpdesk.core.logger import logger
from helpdesk.models.schemas.base_config import BaseConfig, BaseConfigUpdate
from helpdesk.repositories.base_config_repository import BaseConfigRepository


class BaseConfigService:
    """Named defaults of the base system, optionally overridden by a saved copy."""

    def __init__(self, repository: BaseConfigRepository) -> None:
        self.repository = repository
        self._lock = Lock()

    def get_config(self) -> BaseConfig:
        defaults = BaseConfig().model_dump()
        overrides = self.repository.load_overrides()
        try:
            return BaseConfig.model_validate({**defaults, **overrides})
        except ValidationError as exc:
            logger.warning("Ignoring invalid saved configuration (%d errors)", exc.error_count())
            return BaseConfig()

    def save_config(self, payload: BaseConfigUpdate) -> bool:
        with self._lock:
            current = self.get_config().model_dump()
            current.update(payload.model_dump(exclude_none=True))
            saved = self.repository.save(current)
        if saved:
            logger.info("Saved base configuration")
        return saved

    def reset_config(self) -> bool:
        with self._lock:
            reset = self.repository.clear()
        if reset:
            logger.info("Reset base configuration to defaults")
        return reset
