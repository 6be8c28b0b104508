"""Integrity Checker (UNO: single function)."""

from ...utils.logger import get_logger
from ._constants import STATUS_BROKEN, STATUS_EXTERNAL, STATUS_MALFORMED, STATUS_OK
from .IntegrityReport import IntegrityReport
from .LinkGraph import LinkGraph

logger = get_logger("link.check_integrity")


def check_integrity(graph: LinkGraph) -> IntegrityReport:
    """Classify every reference of the graph as ok, broken, external or malformed.

    Pure: reads the graph's snapshot only, touches nothing on disk.
    """
    report = IntegrityReport(
        documents_checked=len(graph.snapshot.documents),
        failures=list(graph.snapshot.failures),
    )
    for rr in graph:
        status = graph.status_of(rr)
        if status == STATUS_OK:
            report.ok_count += 1
        elif status == STATUS_EXTERNAL:
            report.external_count += 1
        elif status == STATUS_MALFORMED:
            logger.warning(f"Malformed reference at {rr.reference.location}: {rr.target.reason}")
            report.malformed.append(rr)
        elif status == STATUS_BROKEN:
            report.broken.append(rr)

    logger.info(
        f"Integrity: {report.ok_count} ok, {report.broken_count} broken, "
        f"{report.external_count} external, {len(report.malformed)} malformed"
    )
    return report
