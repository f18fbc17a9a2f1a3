"""Null Object pattern.

``NullLogger`` implements the ``Logger`` interface by doing nothing, so code
that logs never has to check whether it was given a logger.
"""

import threading
from abc import ABC, abstractmethod
from typing import Optional


class Logger(ABC):
    """Logging interface used by the example service."""

    @abstractmethod
    def log(self, message: str) -> Optional[str]:
        pass


class ConsoleLogger(Logger):
    """Logger that prints every message with a prefix."""

    def __init__(self, prefix: str = "LOG"):
        self.prefix = prefix

    def log(self, message: str) -> str:
        line = f"{self.prefix}: {message}"
        print(line)
        return line


class NullLogger(Logger):
    """Logger that silently discards messages.

    Stateless, so a single shared instance is enough.
    """

    _instance: Optional["NullLogger"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "NullLogger":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def log(self, message: str) -> None:
        return None

    def __repr__(self) -> str:
        return "NullLogger()"


class PaymentService:
    """Client that logs unconditionally."""

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger if logger is not None else NullLogger()

    def process_payment(self, amount: float) -> Optional[str]:
        return self.logger.log(f"Processing payment of {amount:.2f}")


def get_example_logger(enabled: bool) -> Logger:
    """Return a ConsoleLogger when enabled, otherwise the NullLogger."""
    return ConsoleLogger() if enabled else NullLogger()


def demo() -> None:
    """Run the same service with a real logger and with the null logger."""
    for enabled in (True, False):
        PaymentService(get_example_logger(enabled)).process_payment(100)
