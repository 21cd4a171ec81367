from __future__ import annotations

import json
import re
from functools import partial
from typing import Any, Mapping, Optional, Union
from urllib.parse import urljoin

from ..models import Callbacks, RootResolver


ARGUMENT_RE = re.compile(r"\(\(\(([\s\S]*?)\|([^|]*)\|([\s\S]*?)\)\)\)")
IMAGE_RE = re.compile(r"\[\[(.*)\]\]")
LINK_RE = re.compile(r"\(\((.*)\|(.*)\)\)")
NEWLINE_SENTINEL = "\ue000"
LESS_THAN_SENTINEL = "\x01"
NEWLINE_MARKER = "\\n"


def identity_resolver(url: str) -> str:
    return url


def make_root_resolver(root: str) -> RootResolver:
    """Return a resolver joining relative hrefs onto ``root``."""
    base = root if root.endswith("/") else root + "/"

    def resolve(url: str) -> str:
        return urljoin(base, url)

    return resolve


def is_absolute(href: str) -> bool:
    return "://" in href


def default_arg(tag: str, img: str, value: str) -> str:
    return tag


def default_img(src: str) -> str:
    return src


def default_link(text: str, href: str, root_resolver: Optional[RootResolver] = None) -> str:
    if not is_absolute(href):
        href = (root_resolver or identity_resolver)(href)
    encoded = json.dumps(href, ensure_ascii=False)
    return f'<a target="_blank" href={encoded}/>{text}</a>'


def local_link(text: str, href: str, root_resolver: Optional[RootResolver] = None) -> str:
    if is_absolute(href):
        encoded = json.dumps(href, ensure_ascii=False)
        return f'<a target="_blank" rel="noopener noreferrer" href={encoded}/>{text}</a>'
    href = (root_resolver or identity_resolver)(href)
    encoded = json.dumps(href, ensure_ascii=False)
    return f"<a href={encoded}/>{text}</a>"


DEFAULT_CALLBACKS = Callbacks(arg=default_arg, img=default_img, link=default_link)


def merge_callbacks(
    callbacks: Union[Callbacks, Mapping[str, Any], None] = None,
    defaults: Callbacks = DEFAULT_CALLBACKS,
) -> Callbacks:
    """Fill every unset field of ``callbacks`` from ``defaults``.

    A mapping is accepted for convenience; unknown keys raise ``TypeError``.
    """
    if callbacks is None:
        return Callbacks(arg=defaults.arg, img=defaults.img, link=defaults.link)
    if not isinstance(callbacks, Callbacks):
        callbacks = Callbacks(**dict(callbacks))
    return Callbacks(
        arg=callbacks.arg if callbacks.arg is not None else defaults.arg,
        img=callbacks.img if callbacks.img is not None else defaults.img,
        link=callbacks.link if callbacks.link is not None else defaults.link,
    )


def bind_root(link: Any, root: Optional[str]) -> Any:
    if not root:
        return link
    return partial(link, root_resolver=make_root_resolver(root))


def substitute_arguments(text: str, callbacks: Callbacks) -> str:
    """Replace ``(((tag|img|value)))`` tuples, which may span several lines."""
    arg = callbacks.arg or default_arg

    def replace(match: "re.Match[str]") -> str:
        tag, img, value = match.groups()
        return arg(tag.strip(), img.strip(), value.replace("\n", NEWLINE_SENTINEL))

    return ARGUMENT_RE.sub(replace, text)


def decode_line(line: str) -> str:
    return line.replace(NEWLINE_SENTINEL, NEWLINE_MARKER)


def _render_image(match: "re.Match[str]", callbacks: Callbacks) -> str:
    img = callbacks.img or default_img
    parts = match.group(1).split("|")
    src = parts[0]
    width = parts[1] if len(parts) > 1 else ""
    style = f' style="width:{width.strip()}"' if width else ""
    return f'<img{style} src="{img(src.strip())}" alt=""/>'


def _render_link(match: "re.Match[str]", callbacks: Callbacks) -> str:
    link = callbacks.link or default_link
    text, href = match.groups()
    return link(text.strip(), href.strip())


def substitute_media(line: str, callbacks: Callbacks) -> str:
    """Replace image and link markers on a single line, images first."""
    line = IMAGE_RE.sub(lambda match: _render_image(match, callbacks), line.rstrip())
    return LINK_RE.sub(lambda match: _render_link(match, callbacks), line)
