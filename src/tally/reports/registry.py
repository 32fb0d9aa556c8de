"""Reporter lookup by name or import string."""

from __future__ import annotations

import importlib
import inspect
from typing import TYPE_CHECKING

from tally.errors import ConfigError
from tally.reports.console import ConsoleReporter
from tally.reports.trace import TraceReporter

if TYPE_CHECKING:
    from tally.reports.base import Reporter


BUILTIN_REPORTERS: dict[str, type[Reporter]] = {
    "TraceReporter": TraceReporter,
    "ConsoleReporter": ConsoleReporter,
}


def reporter_class(name: str) -> type[Reporter]:
    """Return the reporter class for a built-in name or a ``module:Class`` path.

    ``module.Class`` is accepted as well as ``module:Class``.

    Raises:
        ConfigError: If the name is unknown, cannot be imported, or does not
            implement the Reporter protocol.
    """
    if name in BUILTIN_REPORTERS:
        return BUILTIN_REPORTERS[name]

    if ":" in name:
        module_path, class_name = name.rsplit(":", 1)
    elif "." in name:
        module_path, class_name = name.rsplit(".", 1)
    else:
        available = ", ".join(sorted(BUILTIN_REPORTERS))
        msg = f"Unknown reporter: {name}. Available: {available}"
        raise ConfigError(msg)

    try:
        module = importlib.import_module(module_path)
        cls = getattr(module, class_name)
    except (ImportError, AttributeError) as exc:
        msg = f"Cannot import reporter {name}: {exc}"
        raise ConfigError(msg) from exc

    from tally.reports.base import Reporter

    if not isinstance(cls, type) or not issubclass(cls, Reporter):
        msg = f"{name} does not implement the Reporter protocol"
        raise ConfigError(msg)
    return cls


def resolve_reporter(name: str, *, verbosity: int = 0) -> Reporter:
    """Instantiate a reporter, passing ``verbosity`` when its constructor takes it."""
    cls = reporter_class(name)
    if "verbosity" in inspect.signature(cls).parameters:
        return cls(verbosity=verbosity)
    return cls()


__all__ = ["BUILTIN_REPORTERS", "reporter_class", "resolve_reporter"]
