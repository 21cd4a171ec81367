"""Minimal markup: a tiny line-oriented markup language rendered to HTML."""

from .assembler import BlockAssembler
from .conversion import default_link, make_root_resolver, merge_callbacks, render, render_file, sanitize
from .models import Callbacks, RenderOptions

__all__ = [
    "BlockAssembler",
    "Callbacks",
    "RenderOptions",
    "default_link",
    "make_root_resolver",
    "merge_callbacks",
    "render",
    "render_file",
    "sanitize",
]
