"""Apply API command.

Move files, rewrite every affected link, then re-check the whole tree.
CLI: relink apply [ROOT] [--plan-file F] [--move OLD=NEW]...
"""

from collections.abc import Iterator
from pathlib import Path

from ...constants import EXIT_BROKEN, EXIT_CLEAN, EXIT_INVALID_PLAN
from .._output_schemas.mv import MvApplyOutput
from ..StageResult import StageResult
from .PlanError import PlanError


def cmd_apply(root: str = ".", plan_file: str | None = None, moves: list[str] | None = None) -> StageResult:
    """Execute a move plan.

    Phases run strictly in order: scan, link graph, plan validation, file moves,
    text patches, re-scan and integrity check. An invalid plan stops before any
    mutation (exit 2). Otherwise the exit status is 1 if any reference is broken
    after the run, else 0.
    """

    def _invalid(result_obj: StageResult, root_str: str, message: str, errors: list[str]) -> None:
        result_obj.output = MvApplyOutput(
            errors=errors,
            warnings=[],
            root=root_str,
            valid=False,
            moves=[],
            move_count=0,
            patch_count=0,
            documents=[],
            broken_before=0,
            integrity={},
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False
        result_obj.exit_code = EXIT_INVALID_PLAN

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..link.check_integrity import check_integrity
        from ..link.LinkGraph import LinkGraph
        from ..scan.scan_tree import scan_tree
        from ._prepare_plan import _prepare_plan
        from .apply_moves import apply_moves
        from .apply_patches import apply_patches

        root_str = str(Path(root).expanduser().absolute())

        yield (0.1, "Scanning repository and validating move plan...")
        try:
            prepared = _prepare_plan(root, plan_file, moves)
        except PlanError as e:
            _invalid(result_obj, root_str, f"{e.title}; no files were touched", e.errors)
            return
        except ValueError as e:
            _invalid(result_obj, root_str, f"Cannot open repository: {e}", [str(e)])
            return

        rewrite_plan = prepared.rewrite_plan

        yield (0.3, "Checking links before moving...")
        before = check_integrity(prepared.graph)

        yield (0.45, f"Moving {len(rewrite_plan.moves)} files...")
        outcome = apply_moves(prepared.root, rewrite_plan.moves)

        yield (0.65, f"Rewriting {rewrite_plan.patch_count} links...")
        results = apply_patches(prepared.root, rewrite_plan, prepared.snapshot, outcome.locations)

        yield (0.8, "Re-scanning and checking links...")
        after_snapshot = scan_tree(prepared.root, prepared.config.scan)
        after = check_integrity(LinkGraph.build(after_snapshot, prepared.config.scan))

        yield (1.0, "Complete")
        errors = list(outcome.errors)
        errors.extend(f"{r.path}: {r.error}" for r in results if r.error)
        warnings = list(rewrite_plan.already_applied)
        warnings.extend(after.warnings())
        patch_count = sum(r.rewritten for r in results)

        result_obj.output = MvApplyOutput(
            errors=errors,
            warnings=warnings,
            root=str(prepared.root),
            valid=True,
            moves=[{"from": old, "to": new} for old, new in outcome.moved],
            move_count=len(outcome.moved),
            patch_count=patch_count,
            documents=[r.to_dict() for r in results],
            broken_before=before.broken_count,
            integrity=after.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = after.is_clean
        result_obj.exit_code = EXIT_CLEAN if after.is_clean else EXIT_BROKEN
        summary = f"Moved {len(outcome.moved)} files, rewrote {patch_count} links"
        if after.is_clean:
            result_obj.result = f"{summary}; all links resolve"
        else:
            result_obj.result = f"{summary}; {after.broken_count} broken references remain"

    return StageResult(announce=f"Applying moves under {root}...", progress_callback=do_work)
