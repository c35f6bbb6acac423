"""Install a stand-in target behind a subject's target accessor."""

from __future__ import annotations

import contextlib
import inspect
import logging
import types
from collections.abc import Callable, Iterator
from typing import Any

from delegate_matcher.core.settings import PatchScope

logger = logging.getLogger(__name__)

_MISSING = object()


def is_type_like(subject: Any) -> bool:
    """Whether the subject is itself a class (class-level calls) rather than an instance."""
    return isinstance(subject, type)


def _returns(target: Any) -> Callable[..., Any]:
    def accessor(*args: Any, **kwargs: Any) -> Any:
        return target

    return accessor


def instance_accessor(owner: type, name: str, target: Any) -> Any:
    """Build a class attribute that yields `target` when read from an instance.

    The replacement keeps the calling convention of the original accessor:
    methods stay callable, everything else (properties, slots, class or
    instance attributes) becomes a property.
    """
    original = inspect.getattr_static(owner, name, _MISSING)

    if isinstance(original, staticmethod):
        return staticmethod(_returns(target))
    if isinstance(original, classmethod):
        return classmethod(_returns(target))
    if inspect.isfunction(original):
        return _returns(target)
    return property(lambda self: target)


def class_accessor(owner: type, name: str, target: Any) -> Any:
    """Build a class attribute that yields `target` when read from the class itself."""
    original = inspect.getattr_static(owner, name, _MISSING)

    if isinstance(original, (staticmethod, classmethod)) or inspect.isfunction(original):
        return staticmethod(_returns(target))
    return target


def _patch_type(owner: type, name: str, replacement: Any) -> Callable[[], None]:
    original = owner.__dict__.get(name, _MISSING)
    setattr(owner, name, replacement)
    logger.debug("Replaced %s.%s with spy accessor", owner.__qualname__, name)

    def undo() -> None:
        if original is _MISSING:
            delattr(owner, name)
        else:
            setattr(owner, name, original)
        logger.debug("Restored %s.%s", owner.__qualname__, name)

    return undo


def _patch_instance(subject: Any, name: str, target: Any) -> Callable[[], None]:
    original_type = type(subject)
    replacement = instance_accessor(original_type, name, target)

    def body(namespace: dict[str, Any]) -> None:
        namespace.update(
            {
                "__slots__": (),
                "__module__": original_type.__module__,
                "__qualname__": original_type.__qualname__,
                name: replacement,
            }
        )

    shadow_type = types.new_class(original_type.__name__, (original_type,), exec_body=body)
    subject.__class__ = shadow_type
    logger.debug("Shadowed %s.%s on a single instance", original_type.__qualname__, name)

    def undo() -> None:
        subject.__class__ = original_type
        logger.debug("Restored class of %s instance", original_type.__qualname__)

    return undo


def patch_accessor(subject: Any, name: str, target: Any, scope: PatchScope) -> Callable[[], None]:
    """Make `name` on `subject` yield `target`; return a callable that undoes it."""
    if is_type_like(subject):
        return _patch_type(subject, name, class_accessor(subject, name, target))

    if scope is PatchScope.INSTANCE:
        try:
            return _patch_instance(subject, name, target)
        except TypeError as e:
            logger.warning(
                "Cannot shadow %s on a single %s instance (%s); patching the class instead",
                name,
                type(subject).__qualname__,
                e,
            )

    owner = type(subject)
    return _patch_type(owner, name, instance_accessor(owner, name, target))


@contextlib.contextmanager
def install_target(
    subject: Any,
    name: str,
    target: Any,
    *,
    scope: PatchScope = PatchScope.INSTANCE,
    restore: bool = True,
) -> Iterator[None]:
    """Install `target` behind the accessor `name` for the duration of the block.

    With `restore=False` the replacement outlives the block.
    """
    undo = patch_accessor(subject, name, target, scope)
    try:
        yield
    finally:
        if restore:
            undo()
