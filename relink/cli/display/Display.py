"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where a command's announce, progress, result and output lines go."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message (the command announcement)."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g. ``details``)
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Display structured data.

        Args:
            data: Data to serialize
            kwargs: ``format`` ("json" or "yaml") and ``indent``
        """
