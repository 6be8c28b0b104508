"""Apply Typer app factory - move files and rewrite links."""

from typing import Annotated

import typer

from relink.api.mv.cmd_apply import cmd_apply
from relink.cli._handle_stage_result import _handle_stage_result
from relink.cli._render_report import _render_report
from relink.cli.constants import APPLY_TEMPLATE


def _print_apply(output: dict) -> None:
    if output["valid"]:
        report = _render_report(APPLY_TEMPLATE, output, output["integrity"])
    else:
        report = _render_report(None, output)
    if report:
        print(report)


def apply() -> typer.Typer:
    """Create and configure the apply Typer app."""
    app = typer.Typer(
        name="apply",
        help="Move files, rewrite links, then check the whole tree",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        root: Annotated[str, typer.Argument(help="Repository root")] = ".",
        plan_file: Annotated[
            str | None, typer.Option("--plan-file", "-f", help="YAML or JSON move plan ({old: new} or [{from, to}])")
        ] = None,
        move: Annotated[list[str] | None, typer.Option("--move", "-m", help="Move OLD=NEW (repeatable)")] = None,
    ) -> None:
        """Execute the plan, then re-scan and report.

        Exits 2 (nothing touched) if the plan is invalid, 1 if broken links remain.
        """
        _handle_stage_result(cmd_apply, _print_apply)(root, plan_file, move or [])

    return app
