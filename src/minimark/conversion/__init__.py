"""Conversion pipeline helpers."""

from .callbacks import default_link, make_root_resolver, merge_callbacks
from .core import (
    Assembler,
    AssemblerFactory,
    read_text,
    render,
    render_file,
    run_pipeline,
)
from .inline import sanitize, transform_line

__all__ = [
    "Assembler",
    "AssemblerFactory",
    "default_link",
    "make_root_resolver",
    "merge_callbacks",
    "read_text",
    "render",
    "render_file",
    "run_pipeline",
    "sanitize",
    "transform_line",
]
