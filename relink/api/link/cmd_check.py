"""Link check API command.

CLI: relink check [ROOT]
"""

from collections.abc import Iterator
from pathlib import Path

from ...constants import EXIT_BROKEN, EXIT_CLEAN, EXIT_INVALID_PLAN
from .._output_schemas.link import LinkCheckOutput
from ..StageResult import StageResult


def _empty_output(root: str, errors: list[str]) -> dict:
    return LinkCheckOutput(
        errors=errors,
        warnings=[],
        root=root,
        documents_checked=0,
        references_checked=0,
        ok_count=0,
        external_count=0,
        broken_count=0,
        malformed_count=0,
        broken=[],
        malformed=[],
        is_clean=False,
    ).model_dump(mode="python")


def cmd_check(root: str = ".") -> StageResult:
    """Check every reference under ``root`` without modifying anything.

    Exit status is 1 if any reference is broken, 2 if the repository cannot be opened.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..scan.open_repository import open_repository
        from .check_integrity import check_integrity
        from .LinkGraph import LinkGraph

        yield (0.1, "Loading configuration...")
        try:
            root_path, config, snapshot = open_repository(root)
        except ValueError as e:
            result_obj.output = _empty_output(str(Path(root).expanduser().absolute()), [str(e)])
            result_obj.result = f"Cannot open repository: {e}"
            result_obj.success = False
            result_obj.exit_code = EXIT_INVALID_PLAN
            return

        yield (0.4, f"Extracting links from {len(snapshot.documents)} documents...")
        graph = LinkGraph.build(snapshot, config.scan)

        yield (0.7, "Checking link targets...")
        report = check_integrity(graph)

        yield (1.0, "Complete")
        result_obj.output = LinkCheckOutput(
            errors=[],
            warnings=report.warnings(),
            root=str(root_path),
            **report.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = report.is_clean
        result_obj.exit_code = EXIT_CLEAN if report.is_clean else EXIT_BROKEN
        if report.is_clean:
            result_obj.result = f"All {report.ok_count} file references resolve"
        else:
            result_obj.result = f"Found {report.broken_count} broken references"

    return StageResult(announce=f"Checking links under {root}...", progress_callback=do_work)
