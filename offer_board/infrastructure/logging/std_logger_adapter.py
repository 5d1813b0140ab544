import logging
from typing import Optional

from offer_board.domain.ports.services.logger import LoggerPort


class StdLoggerAdapter(LoggerPort):
    def __init__(self, name: Optional[str] = None):
        self._logger = logging.getLogger(name or "offer_board")

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self._logger.exception(msg, *args, **kwargs)
