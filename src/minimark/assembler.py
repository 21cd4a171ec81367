from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .models import AssemblerState, ClassifiedLine, ContainerStyle, LineKind


logger = logging.getLogger(__name__)

HEADING_MARKERS: List[Tuple[str, int]] = [("###", 3), ("##", 2), ("#", 1)]
CELL_ALIGN_MARKERS: List[Tuple[str, str]] = [(":", "c"), (">", "r")]
COLSPAN_MARKER = "-"


def wrap(tag: str, value: str) -> str:
    return f"<{tag}>{value}</{tag}>"


def _after(prefix: str, line: str) -> Optional[str]:
    """Trimmed remainder after ``prefix``, or ``None`` when absent or empty."""
    if not line.startswith(prefix):
        return None
    rest = line[len(prefix) :].strip()
    return rest or None


def _match_container_open(line: str) -> Optional[ClassifiedLine]:
    rest = _after("{{", line)
    return ClassifiedLine(LineKind.CONTAINER_OPEN, rest) if rest is not None else None


def _match_container_close(line: str) -> Optional[ClassifiedLine]:
    if line.startswith("}}"):
        return ClassifiedLine(LineKind.CONTAINER_CLOSE)
    return None


def _match_heading(line: str) -> Optional[ClassifiedLine]:
    for marker, level in HEADING_MARKERS:
        rest = _after(marker, line)
        if rest is not None:
            return ClassifiedLine(LineKind.HEADING, rest, level)
    return None


def _match_horizontal_rule(line: str) -> Optional[ClassifiedLine]:
    if line.startswith("---"):
        return ClassifiedLine(LineKind.HORIZONTAL_RULE)
    return None


def _match_unordered_item(line: str) -> Optional[ClassifiedLine]:
    rest = _after("*", line)
    return ClassifiedLine(LineKind.UNORDERED_ITEM, rest) if rest is not None else None


def _match_ordered_item(line: str) -> Optional[ClassifiedLine]:
    rest = _after("+", line)
    return ClassifiedLine(LineKind.ORDERED_ITEM, rest) if rest is not None else None


def _match_table_row(line: str) -> Optional[ClassifiedLine]:
    if _after("|", line) is None:
        return None
    return ClassifiedLine(LineKind.TABLE_ROW, line)


# Order matters: the first matcher that accepts a line decides its kind.
LINE_MATCHERS: List[Callable[[str], Optional[ClassifiedLine]]] = [
    _match_container_open,
    _match_container_close,
    _match_heading,
    _match_horizontal_rule,
    _match_unordered_item,
    _match_ordered_item,
    _match_table_row,
]


def classify(line: str) -> ClassifiedLine:
    for matcher in LINE_MATCHERS:
        classified = matcher(line)
        if classified is not None:
            return classified
    return ClassifiedLine(LineKind.TEXT, line.strip())


def render_table_row(line: str) -> str:
    cells: List[str] = []
    span = 1
    for cell in line.split("|")[1:]:
        if cell.strip() == COLSPAN_MARKER:
            span += 1
            continue
        css = ""
        content = cell
        for marker, name in CELL_ALIGN_MARKERS:
            rest = _after(marker, cell)
            if rest is not None:
                css, content = name, rest
                break
        attrs = f' class="{css}"' if css else ""
        if span > 1:
            attrs += f' colspan="{span}"'
        cells.append(f"<td{attrs}>{content.strip()}</td>")
        span = 1
    return wrap("tr", "".join(cells))


class BlockAssembler:
    """Turn transformed lines into nested block-level HTML.

    Lists and tables are flushed into the pending paragraph and the
    paragraph into the result, so a flush of everything must run in
    that order.
    """

    def __init__(self) -> None:
        self.state = AssemblerState()
        self._handlers: Dict[LineKind, Callable[[ClassifiedLine], None]] = {
            LineKind.CONTAINER_OPEN: self._open_container,
            LineKind.CONTAINER_CLOSE: self._close_container,
            LineKind.HEADING: self._add_heading,
            LineKind.HORIZONTAL_RULE: self._add_horizontal_rule,
            LineKind.UNORDERED_ITEM: self._add_unordered_item,
            LineKind.ORDERED_ITEM: self._add_ordered_item,
            LineKind.TABLE_ROW: self._add_table_row,
            LineKind.TEXT: self._add_text,
        }

    def assemble(self, lines: Iterable[str]) -> str:
        self._reset_state()
        for line in lines:
            self.feed(line)
        return self.finalize()

    def feed(self, line: str) -> None:
        classified = classify(line)
        self._handlers[classified.kind](classified)

    def finalize(self) -> str:
        self.flush_all()
        state = self.state
        if state.open_containers > 0:
            logger.debug("Closing %d unbalanced container(s) at end of input.", state.open_containers)
        while state.open_containers > 0:
            state.result.append("</div>")
            state.open_containers -= 1
        return "".join(state.result)

    def flush_lists(self) -> None:
        state = self.state
        if state.unordered_items:
            state.paragraph.append(wrap("ul", "".join(state.unordered_items)))
        state.unordered_items.clear()
        if state.ordered_items:
            state.paragraph.append(wrap("ol", "".join(state.ordered_items)))
        state.ordered_items.clear()

    def flush_table(self) -> None:
        state = self.state
        if state.table_rows:
            state.paragraph.append(wrap("table", "".join(state.table_rows)))
        state.table_rows.clear()

    def flush_paragraph(self) -> None:
        state = self.state
        if state.paragraph:
            state.result.append(wrap("p", "".join(state.paragraph)))
        state.paragraph.clear()

    def flush_all(self) -> None:
        self.flush_lists()
        self.flush_table()
        self.flush_paragraph()

    def _reset_state(self) -> None:
        self.state = AssemblerState()

    def _add_element(self, html: str) -> None:
        self.flush_all()
        self.state.result.append(html)

    # Line handlers -----------------------------------------------------
    def _open_container(self, line: ClassifiedLine) -> None:
        css_class = ContainerStyle.from_marker(line.text).css_class
        attrs = f' class="{css_class}"' if css_class else ""
        self._add_element(f"<div{attrs}>")
        self.state.open_containers += 1

    def _close_container(self, _line: ClassifiedLine) -> None:
        self.state.open_containers -= 1
        if self.state.open_containers < 0:
            logger.debug("Container closed without a matching open.")
        self._add_element("</div>")

    def _add_heading(self, line: ClassifiedLine) -> None:
        self._add_element(wrap(f"h{line.level}", line.text))

    def _add_horizontal_rule(self, _line: ClassifiedLine) -> None:
        self._add_element("<hr/>")

    def _add_unordered_item(self, line: ClassifiedLine) -> None:
        self.flush_paragraph()
        self.state.unordered_items.append(wrap("li", line.text))

    def _add_ordered_item(self, line: ClassifiedLine) -> None:
        self.flush_paragraph()
        self.state.ordered_items.append(wrap("li", line.text))

    def _add_table_row(self, line: ClassifiedLine) -> None:
        self.flush_paragraph()
        self.state.table_rows.append(render_table_row(line.text))

    def _add_text(self, line: ClassifiedLine) -> None:
        self.flush_lists()
        self.flush_table()
        if not line.text:
            self.flush_paragraph()
        else:
            self.state.paragraph.append(line.text + " ")
