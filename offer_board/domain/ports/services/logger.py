from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seen from the domain side; adapters live in infrastructure."""

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def exception(self, msg: str, *args, **kwargs) -> None:
        pass
