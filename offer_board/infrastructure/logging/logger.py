import logging
from logging import Logger as StdLogger
from typing import Optional

from offer_board.infrastructure.config.settings import LoggingSettings


def setup_logging(level: Optional[str] = None, noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=(level or LoggingSettings().LOG_LEVEL).upper(),
        handlers=[handler],
        force=True,
    )

    if noisy_libs is not None:
        for lib, lib_level in noisy_libs.items():
            logging.getLogger(lib).setLevel(lib_level)


class Logger:
    @staticmethod
    def get_logger(name: Optional[str] = None) -> StdLogger:
        return logging.getLogger(name)
