from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Protocol, Union

from ..assembler import BlockAssembler, classify
from ..models import Callbacks, LineKind
from .callbacks import LESS_THAN_SENTINEL, decode_line, merge_callbacks, substitute_arguments, substitute_media
from .inline import sanitize, transform_text


CallbacksLike = Union[Callbacks, Mapping[str, Any], None]

# Lines of these kinds keep their raw text; image and link markup in them is not expanded.
VERBATIM_KINDS = {LineKind.CONTAINER_OPEN, LineKind.CONTAINER_CLOSE, LineKind.HORIZONTAL_RULE}


class Assembler(Protocol):
    def assemble(self, lines: Iterable[str]) -> str:
        ...


class AssemblerFactory(Protocol):
    def __call__(self) -> Assembler:
        ...


def read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8") as handle:
        return handle.read()


def prepare_lines(text: str, callbacks: Callbacks) -> Iterable[str]:
    """Run the sanitizing, inline and callback stages, yielding block-ready lines."""
    text = transform_text(sanitize(text))
    text = substitute_arguments(text, callbacks)
    for line in text.split("\n"):
        line = decode_line(line)
        if classify(line).kind in VERBATIM_KINDS:
            yield line
        else:
            yield substitute_media(line, callbacks)


def run_pipeline(
    text: str,
    *,
    callbacks: Callbacks,
    assembler: Assembler,
) -> str:
    html = assembler.assemble(prepare_lines(text, callbacks))
    return html.replace(LESS_THAN_SENTINEL, "<")


def render(
    text: str,
    callbacks: CallbacksLike = None,
    *,
    assembler_factory: Optional[AssemblerFactory] = None,
) -> str:
    """Convert minimal markup into HTML.

    ``callbacks`` may be a :class:`Callbacks` or a mapping with ``arg``,
    ``img`` and ``link`` keys; missing hooks use the defaults. Errors raised
    by the hooks propagate to the caller.
    """
    assembler = (assembler_factory or BlockAssembler)()
    return run_pipeline(text, callbacks=merge_callbacks(callbacks), assembler=assembler)


def render_file(path: Path, callbacks: CallbacksLike = None) -> str:
    return render(read_text(path), callbacks)
