from __future__ import annotations

from typing import Any, Optional, Protocol

from ..conversion.callbacks import DEFAULT_CALLBACKS, bind_root, local_link, merge_callbacks
from ..models import Callbacks, RenderOptions
from .registry import PluginRegistry


class CallbacksFactory(Protocol):
    def __call__(self, *, root: Optional[str] = None, **kwargs: Any) -> Callbacks:
        ...


callback_plugins = PluginRegistry[CallbacksFactory]("callback preset")


def register_callbacks(name: str, factory: CallbacksFactory) -> None:
    callback_plugins.register(name, factory)


def get_callbacks_factory(name: str) -> CallbacksFactory:
    return callback_plugins.get(name)


def available_callbacks() -> list[str]:
    return callback_plugins.names()


def build_callbacks(options: RenderOptions) -> Callbacks:
    factory = get_callbacks_factory(options.callbacks)
    return factory(root=options.root)


def _default_factory(*, root: Optional[str] = None, **_: Any) -> Callbacks:
    callbacks = merge_callbacks(None)
    callbacks.link = bind_root(DEFAULT_CALLBACKS.link, root)
    return callbacks


def _local_factory(*, root: Optional[str] = None, **_: Any) -> Callbacks:
    return merge_callbacks(Callbacks(link=bind_root(local_link, root)))


register_callbacks("default", _default_factory)
register_callbacks("local", _local_factory)


__all__ = [
    "CallbacksFactory",
    "available_callbacks",
    "build_callbacks",
    "get_callbacks_factory",
    "register_callbacks",
]
