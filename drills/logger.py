"""Loggers that write messages at a verbosity level."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Logger(ABC):
    """Something that logs messages at a verbosity level."""

    @abstractmethod
    def log(self, verbosity: int, message: str) -> None:
        """Log a message at the given verbosity level."""


class StdoutLogger(Logger):
    """Writes every message to standard output."""

    def log(self, verbosity: int, message: str) -> None:
        print(f"verbosity={verbosity}: {message}")


@dataclass
class VerbosityFilter(Logger):
    """Passes on only messages up to the given verbosity level."""

    max_verbosity: int
    inner: Logger = field(default_factory=StdoutLogger)

    def log(self, verbosity: int, message: str) -> None:
        if verbosity <= self.max_verbosity:
            self.inner.log(verbosity, message)