"""Plan Typer app factory - preview a move plan without writing."""

from typing import Annotated

import typer

from relink.api.mv.cmd_plan import cmd_plan
from relink.cli._handle_stage_result import _handle_stage_result
from relink.cli._render_report import _render_report
from relink.cli.constants import PLAN_TEMPLATE


def _print_plan(output: dict) -> None:
    report = _render_report(PLAN_TEMPLATE if output["valid"] else None, output)
    if report:
        print(report)


def plan() -> typer.Typer:
    """Create and configure the plan Typer app."""
    app = typer.Typer(
        name="plan",
        help="Show the expanded move plan and predicted link rewrites",
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
        """Validate the plan and list every file move and link rewrite it implies.

        Nothing is written. Exits 2 if the plan is invalid.
        """
        _handle_stage_result(cmd_plan, _print_plan)(root, plan_file, move or [])

    return app
