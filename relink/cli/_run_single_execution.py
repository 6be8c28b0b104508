"""Run command once and display result using the 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from relink.cli.display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once, display it, and exit with the command's status code.

    Commands handle their own failures and report them through their output schema.
    """
    result = func(*args, **kwargs)

    display.status(result.announce)

    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    if display_format == "text" and result_printer is not None:
        result_printer(result.output)
    else:
        display.json_output(result.output, format="json" if display_format == "json" else "yaml")

    sys.exit(result.status_code)
