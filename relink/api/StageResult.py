"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    ``exit_code`` overrides the default process status (0 on success, 1 otherwise)
    when a command needs a richer signal, e.g. 2 for an invalid move plan.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
    exit_code: int | None = None

    @property
    def status_code(self) -> int:
        """Process exit status for this result."""
        if self.exit_code is not None:
            return self.exit_code
        return 0 if self.success else 1
