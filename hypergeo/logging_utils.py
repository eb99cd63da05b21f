"""DEBUG call tracing for the solver and projection modules.

Modules opt in with ``apply_debug_logging(globals(), logger=logger)`` at the
bottom of the file. Each public function then logs its arguments and result
when its logger is enabled for DEBUG; otherwise the wrapper only checks the
level.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

MAX_ITEMS = 6
MAX_LENGTH = 400

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10


def _summarise_array(value: np.ndarray) -> str:
    head = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    if value.size == 0:
        return head
    if value.size <= MAX_ITEMS:
        return f"{head}, values={_repr.repr(value.tolist())}"
    return f"{head}, min={float(value.min()):.6g}, max={float(value.max()):.6g}"


def _summarise_record(value: Any) -> str:
    # unknown measurements (None) are left out to keep triangle states short
    known = [
        f"{field.name}={_summarise(getattr(value, field.name))}"
        for field in dataclasses.fields(value)
        if getattr(value, field.name) is not None
    ]
    return f"{type(value).__name__}({', '.join(known)})"


def _summarise(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    if isinstance(value, np.ndarray):
        return _summarise_array(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _summarise_record(value)
    if isinstance(value, (list, tuple)) and not hasattr(value, "_fields"):
        shown = [_summarise(item) for item in value[:MAX_ITEMS]]
        if len(value) > MAX_ITEMS:
            shown.append(f"... {len(value) - MAX_ITEMS} more")
        body = ", ".join(shown)
        return f"({body})" if isinstance(value, tuple) else f"[{body}]"

    rendered = _repr.repr(value)
    if len(rendered) > MAX_LENGTH:
        return rendered[:MAX_LENGTH] + "... (truncated)"
    return rendered


def _describe_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    described = [_summarise(arg) for arg in args]
    described.extend(f"{key}={_summarise(value)}" for key, value in kwargs.items())
    return ", ".join(described)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Decorator logging entry, exit and failure of ``func`` at DEBUG level."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func
        label = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            tracing = logger.isEnabledFor(logging.DEBUG)
            if tracing:
                logger.debug("Entering %s(%s)", label, _describe_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                if tracing:
                    logger.debug("Exception in %s: %s: %s", label, type(exc).__name__, exc)
                raise
            if tracing:
                logger.debug("Exiting %s -> %s", label, _summarise(result) if log_result else "...")
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public functions defined in ``namespace`` with :func:`debug_log_call`."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(str(module_name))
    skipped = set(skip or ())

    targets = [
        name
        for name, value in namespace.items()
        if not name.startswith("_")
        and name not in skipped
        and inspect.isfunction(value)
        and value.__module__ == module_name
    ]
    for name in targets:
        namespace[name] = debug_log_call(logger, name=name)(namespace[name])
