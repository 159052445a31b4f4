import logging

import pytest
from helpdesk.core.config import Settings
from helpdesk.core.logger import configure_logging, logger
from helpdesk.repositories.storage import InMemoryStorage
from helpdesk.repositories.ticket_repository import TICKETS_KEY
from helpdesk.services.container import build_services


def test_cors_origins_list_splits_and_trims() -> None:
    settings = Settings(cors_origins="http://localhost:5173, http://127.0.0.1:5173,,")

    assert settings.cors_origins_list == ["http://localhost:5173", "http://127.0.0.1:5173"]


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STORAGE_BACKEND", "postgres")
    monkeypatch.setenv("SEED_ON_STARTUP", "false")

    settings = Settings()

    assert settings.storage_backend == "postgres"
    assert settings.seed_on_startup is False


def test_configure_logging_attaches_handlers_once() -> None:
    configure_logging("debug")
    handler_count = len(logger.handlers)
    configure_logging("warning")

    assert len(logger.handlers) == handler_count
    assert logger.level == logging.WARNING
    configure_logging("info")


def test_seeding_can_be_disabled() -> None:
    services = build_services(
        Settings(storage_backend="memory", seed_on_startup=False), InMemoryStorage()
    )

    assert services.ticket_service.list_tickets() == []
    assert len(services.pedido_service.list_pedidos()) == 7


def test_failed_persistence_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="helpdesk"):
        build_services(Settings(storage_backend="memory"), InMemoryStorage(quota_bytes=10))

    assert any(TICKETS_KEY in record.getMessage() for record in caplog.records)
