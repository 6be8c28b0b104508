"""Plan API command.

CLI: relink plan [ROOT] [--plan-file F] [--move OLD=NEW]...
"""

from collections.abc import Iterator
from pathlib import Path

from ...constants import EXIT_CLEAN, EXIT_INVALID_PLAN
from .._output_schemas.mv import MvPlanOutput
from ..StageResult import StageResult
from .PlanError import PlanError


def cmd_plan(root: str = ".", plan_file: str | None = None, moves: list[str] | None = None) -> StageResult:
    """Print the expanded move plan and predicted rewrites without writing anything."""

    def _build_result(
        result_obj: StageResult,
        root_str: str,
        message: str,
        valid: bool,
        moves_out: list[dict[str, str]],
        patch_count: int,
        documents: list[dict],
        patches: list[dict],
        errors: list[str],
        warnings: list[str],
    ) -> None:
        result_obj.output = MvPlanOutput(
            errors=errors,
            warnings=warnings,
            root=root_str,
            valid=valid,
            moves=moves_out,
            move_count=len(moves_out),
            patch_count=patch_count,
            documents=documents,
            patches=patches,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = valid
        result_obj.exit_code = EXIT_CLEAN if valid else EXIT_INVALID_PLAN

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ._prepare_plan import _prepare_plan

        root_str = str(Path(root).expanduser().absolute())

        yield (0.2, "Scanning repository and validating move plan...")
        try:
            prepared = _prepare_plan(root, plan_file, moves)
        except PlanError as e:
            _build_result(result_obj, root_str, f"{e.title}; nothing would be changed", False, [], 0, [], [], e.errors, [])
            return
        except ValueError as e:
            _build_result(result_obj, root_str, f"Cannot open repository: {e}", False, [], 0, [], [], [str(e)], [])
            return

        yield (0.8, "Collecting predicted rewrites...")
        rewrite_plan = prepared.rewrite_plan
        patches = [patch.to_dict() for doc in rewrite_plan.documents for patch in doc.patches]

        yield (1.0, "Complete")
        _build_result(
            result_obj,
            str(prepared.root),
            f"Plan: {len(rewrite_plan.moves)} moves, {rewrite_plan.patch_count} link rewrites",
            True,
            [{"from": old, "to": new} for old, new in rewrite_plan.moves],
            rewrite_plan.patch_count,
            [doc.to_dict() for doc in rewrite_plan.documents],
            patches,
            [],
            list(rewrite_plan.already_applied),
        )

    return StageResult(announce=f"Planning moves under {root}...", progress_callback=do_work)
