import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger("helpdesk")


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    logger.setLevel(level.upper())

    # Handlers are attached once even if the app is built several times.
    if logger.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
