"""Render the text report for a command output (UNO: single function)."""

from relink.cli.constants import INTEGRITY_SUMMARY_TEMPLATE, MESSAGES_TEMPLATE
from relink.templating import render_template


def _render_report(body_template: str | None, output: dict, integrity: dict | None = None) -> str:
    """Body, then the integrity summary, then error and warning lines.

    Empty sections are dropped, so an invalid plan renders only its errors.
    """
    sections = []
    if body_template is not None:
        sections.append(render_template(body_template, output))
    if integrity:
        sections.append(render_template(INTEGRITY_SUMMARY_TEMPLATE, integrity))
    sections.append(render_template(MESSAGES_TEMPLATE, output))
    return "\n".join(section.rstrip("\n") for section in sections if section.strip())
