from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional


ArgCallback = Callable[[str, str, str], str]
ImgCallback = Callable[[str], str]
RootResolver = Callable[[str], str]
LinkCallback = Callable[..., str]


class LineKind(Enum):
    CONTAINER_OPEN = "container_open"
    CONTAINER_CLOSE = "container_close"
    HEADING = "heading"
    HORIZONTAL_RULE = "horizontal_rule"
    UNORDERED_ITEM = "unordered_item"
    ORDERED_ITEM = "ordered_item"
    TABLE_ROW = "table_row"
    TEXT = "text"


@dataclass
class ClassifiedLine:
    kind: LineKind
    text: str = ""
    level: int = 0


@dataclass
class Callbacks:
    """Caller-pluggable rendering hooks; ``None`` fields fall back to the defaults."""

    arg: Optional[ArgCallback] = None
    img: Optional[ImgCallback] = None
    link: Optional[LinkCallback] = None


@dataclass
class ContainerStyle:
    justify: bool = False
    center: bool = False
    right: bool = False
    bold: bool = False
    italic: bool = False

    @classmethod
    def from_marker(cls, text: str) -> "ContainerStyle":
        justify = "::" in text
        return cls(
            justify=justify,
            center=not justify and ":" in text,
            right=">" in text,
            bold="*" in text,
            italic="/" in text,
        )

    @property
    def css_class(self) -> str:
        names = []
        if self.justify:
            names.append("justify")
        elif self.center:
            names.append("center")
        if self.right:
            names.append("right")
        if self.bold:
            names.append("bold")
        if self.italic:
            names.append("italic")
        return " ".join(names)


@dataclass
class AssemblerState:
    unordered_items: List[str] = field(default_factory=list)
    ordered_items: List[str] = field(default_factory=list)
    table_rows: List[str] = field(default_factory=list)
    paragraph: List[str] = field(default_factory=list)
    result: List[str] = field(default_factory=list)
    open_containers: int = 0


@dataclass
class RenderOptions:
    callbacks: str = "default"
    root: Optional[str] = None
