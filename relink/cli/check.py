"""Check Typer app factory - verify every link under a repository root."""

from typing import Annotated

import typer

from relink.api.link.cmd_check import cmd_check
from relink.cli._handle_stage_result import _handle_stage_result
from relink.cli._render_report import _render_report


def _print_check(output: dict) -> None:
    report = _render_report(None, output, output if not output["errors"] else None)
    if report:
        print(report)


def check() -> typer.Typer:
    """Create and configure the check Typer app."""
    app = typer.Typer(
        name="check",
        help="Report every broken link (no changes are made)",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        root: Annotated[str, typer.Argument(help="Repository root to scan")] = ".",
    ) -> None:
        """Scan ROOT and classify every reference as OK, BROKEN, EXTERNAL or MALFORMED.

        Exits 1 if any reference is BROKEN.
        """
        _handle_stage_result(cmd_check, _print_check)(root)

    return app
