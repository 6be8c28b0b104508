"""Markdown link parser."""

import re
from collections.abc import Iterator

from .._constants import LINK_KIND_FILE_URL, LINK_KIND_INLINE, LINK_KIND_REFERENCE
from ._BaseParser import BaseParser
from .LinkRef import LinkRef

# Opening/closing code fence: any indent (list nesting), then ``` or ~~~ (3+)
FENCE_PATTERN = re.compile(r"^[ \t]*(`{3,}|~{3,})(.*)$")
# Blockquote markers preceding a fence: "> ", "> > "
BLOCKQUOTE_PREFIX = re.compile(r"^(?:[ \t]*>[ \t]?)+")
# Reference-style definition: [label]: target (footnotes "[^1]:" excluded)
REFERENCE_DEF_PATTERN = re.compile(r"^ {0,3}\[(?!\^)((?:[^\[\]\\]|\\.)+)\]:[ \t]*")
# Bare file URL in prose
FILE_URL_PATTERN = re.compile(r"file://[^\s<>\"'`()\[\]]+")
FILE_URL_TRAILING = ".,;:!?"
BACKTICK_RUN = re.compile(r"`+")

FRONT_MATTER_OPEN = "---"
FRONT_MATTER_CLOSE = ("---", "...")

Span = tuple[int, int]


def _inside(index: int, spans: list[Span]) -> bool:
    return any(start <= index < end for start, end in spans)


def _code_spans(line: str) -> list[Span]:
    """Character ranges covered by `inline code` on a line."""
    spans: list[Span] = []
    pos = 0
    while True:
        opening = BACKTICK_RUN.search(line, pos)
        if opening is None:
            return spans
        run = opening.group(0)
        closing = re.compile(rf"(?<!`){run}(?!`)").search(line, opening.end())
        if closing is None:
            pos = opening.end()
            continue
        spans.append((opening.start(), closing.end()))
        pos = closing.end()


def _match_bracket(line: str, open_idx: int, code_spans: list[Span]) -> int | None:
    """Index of the "]" balancing the "[" at open_idx, honouring escapes and nesting."""
    depth = 0
    j = open_idx
    n = len(line)
    while j < n:
        c = line[j]
        if c == "\\":
            j += 2
            continue
        if j != open_idx and _inside(j, code_spans):
            j += 1
            continue
        if c == "[":
            depth += 1
        elif c == "]":
            depth -= 1
            if depth == 0:
                return j
        j += 1
    return None


def _inline_destination(line: str, paren_idx: int) -> tuple[int, int, bool, int] | None:
    """Parse ``(target "title")`` starting at paren_idx.

    Returns (target_start, target_end, angle_brackets, closing_paren_index) or None
    when the parenthesis never balances.
    """
    n = len(line)
    j = paren_idx + 1
    while j < n and line[j] in " \t":
        j += 1

    if j < n and line[j] == "<":
        close = line.find(">", j + 1)
        if close == -1:
            return None
        start, end, angle = j + 1, close, True
        j = close + 1
    else:
        start = j
        depth = 0
        while j < n:
            c = line[j]
            if c == "\\":
                j += 2
                continue
            if c in " \t":
                break
            if c == "(":
                depth += 1
            elif c == ")":
                if depth == 0:
                    break
                depth -= 1
            j += 1
        j = min(j, n)
        if depth != 0:
            return None
        end, angle = j, False

    while j < n and line[j] in " \t":
        j += 1
    if j < n and j > end and line[j] in "\"'(":
        closer = ")" if line[j] == "(" else line[j]
        k = line.find(closer, j + 1)
        if k == -1:
            return None
        j = k + 1
        while j < n and line[j] in " \t":
            j += 1
    if j >= n or line[j] != ")":
        return None
    return start, end, angle, j


def _definition_destination(line: str, pos: int) -> tuple[int, int, bool] | None:
    n = len(line)
    if pos >= n:
        return None
    if line[pos] == "<":
        close = line.find(">", pos + 1)
        if close == -1:
            return None
        return pos + 1, close, True
    j = pos
    while j < n and line[j] not in " \t":
        j += 1
    return pos, j, False


class MarkdownParser(BaseParser):
    """Parser for Markdown files.

    Finds inline links and images ``[label](target)``, reference-style definitions
    ``[label]: target`` and bare ``file://`` URLs. Fenced code blocks are never
    scanned; front matter and inline code spans are skipped when enabled.
    """

    def __init__(self, skip_front_matter: bool = True, skip_inline_code: bool = True):
        self.skip_front_matter = skip_front_matter
        self.skip_inline_code = skip_inline_code

    def parse(self, text: str) -> Iterator[LinkRef]:
        # Split on "\n" only so line numbers match what editors show
        lines = text.split("\n")
        front_matter_end = self._front_matter_end(lines) if self.skip_front_matter else 0
        fence: str | None = None
        offset = 0

        for index, raw_line in enumerate(lines):
            line_offset = offset
            offset += len(raw_line) + 1
            line = raw_line[:-1] if raw_line.endswith("\r") else raw_line

            if index < front_matter_end:
                continue

            fence_match = FENCE_PATTERN.match(BLOCKQUOTE_PREFIX.sub("", line))
            if fence is not None:
                if fence_match and self._closes(fence, fence_match):
                    fence = None
                continue
            if fence_match:
                marker = fence_match.group(1)
                # A backtick fence's info string cannot contain backticks
                if not (marker[0] == "`" and "`" in fence_match.group(2)):
                    fence = marker
                    continue

            yield from self._parse_line(line, index + 1, line_offset)

    @staticmethod
    def _front_matter_end(lines: list[str]) -> int:
        """Number of leading lines forming a front matter block (0 if none)."""
        if not lines or lines[0].rstrip() != FRONT_MATTER_OPEN:
            return 0
        for i in range(1, len(lines)):
            if lines[i].rstrip() in FRONT_MATTER_CLOSE:
                return i + 1
        return 0

    @staticmethod
    def _closes(fence: str, match: re.Match[str]) -> bool:
        marker = match.group(1)
        return marker[0] == fence[0] and len(marker) >= len(fence) and not match.group(2).strip()

    def _parse_line(self, line: str, line_number: int, line_offset: int) -> Iterator[LinkRef]:
        code_spans = _code_spans(line) if self.skip_inline_code else []
        found: list[LinkRef] = []
        taken: list[Span] = []

        definition = REFERENCE_DEF_PATTERN.match(line)
        if definition and not _inside(definition.start(), code_spans):
            dest = _definition_destination(line, definition.end())
            if dest is not None:
                start, end, angle = dest
                found.append(
                    LinkRef(
                        line_number=line_number,
                        column_number=start + 1,
                        offset=line_offset + start,
                        raw_target=line[start:end],
                        link_type=LINK_KIND_REFERENCE,
                        alias=definition.group(1).strip(),
                        angle_brackets=angle,
                    )
                )
                taken.append((start, end))
        else:
            for alias, start, end, is_embed, angle, span in self._inline_links(line, code_spans):
                found.append(
                    LinkRef(
                        line_number=line_number,
                        column_number=start + 1,
                        offset=line_offset + start,
                        raw_target=line[start:end],
                        link_type=LINK_KIND_INLINE,
                        alias=alias,
                        is_embed=is_embed,
                        angle_brackets=angle,
                    )
                )
                taken.append(span)

        for match in FILE_URL_PATTERN.finditer(line):
            start = match.start()
            if _inside(start, code_spans) or _inside(start, taken):
                continue
            url = match.group(0).rstrip(FILE_URL_TRAILING)
            found.append(
                LinkRef(
                    line_number=line_number,
                    column_number=start + 1,
                    offset=line_offset + start,
                    raw_target=url,
                    link_type=LINK_KIND_FILE_URL,
                )
            )

        found.sort(key=lambda ref: ref.column_number)
        yield from found

    @staticmethod
    def _inline_links(line: str, code_spans: list[Span]) -> Iterator[tuple[str, int, int, bool, bool, Span]]:
        """Yield (label, target_start, target_end, is_embed, angle_brackets, destination_span)."""
        destinations: list[Span] = []
        n = len(line)
        i = 0
        while i < n:
            c = line[i]
            if c == "\\":
                i += 2
                continue
            if c != "[" or _inside(i, code_spans) or _inside(i, destinations):
                i += 1
                continue
            close = _match_bracket(line, i, code_spans)
            if close is None or close + 1 >= n or line[close + 1] != "(":
                i += 1
                continue
            dest = _inline_destination(line, close + 1)
            if dest is None:
                i += 1
                continue
            start, end, angle, paren_close = dest
            span = (close + 1, paren_close + 1)
            destinations.append(span)
            is_embed = i > 0 and line[i - 1] == "!"
            yield line[i + 1 : close].strip(), start, end, is_embed, angle, span
            # Continue inside the label so nested image links are found too
            i += 1
