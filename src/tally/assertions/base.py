"""Continue-on-failure assertions."""

from __future__ import annotations

import ast
import functools
import inspect
import linecache
import logging
from types import FrameType
from typing import Any

from tally.assertions.result import AssertionResult
from tally.testing.context import TEST_CONTEXT, active_tallies, get_reporter

logger = logging.getLogger(__name__)


def assert_check(condition_text: str, condition_value: Any) -> AssertionResult:
    """Report whether a condition held, without ever raising.

    A passing condition is traced to stdout and a failing one to stderr;
    either way execution continues. The result is also collected by the
    enclosing test block and by every active :class:`~tally.Tally`.

    Parameters
    ----------
    condition_text : str
        Label identifying the checked expression in the trace
    condition_value : Any
        Checked value, interpreted by truthiness

    Returns:
    -------
    AssertionResult
        Result of the check; truthy when the condition held
    """
    ctx = TEST_CONTEXT.get()
    result = AssertionResult(
        condition_text=str(condition_text),
        passed=bool(condition_value),
        test_description=ctx.description if ctx else None,
    )

    if ctx is not None:
        ctx.collected_assertion_results.append(result)
    for tally in active_tallies():
        tally.record_assertion(result)

    get_reporter().on_assertion(result)
    return result


def check(condition: Any, label: str | None = None) -> AssertionResult:
    """Check ``condition``, labelling it with its own source text.

    ``check(add(2, 3) == 5)`` reports ``add(2, 3) == 5``. When the calling
    source cannot be recovered the label falls back to ``repr(condition)``.
    """
    if label is None:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        try:
            label = _caller_argument_text(caller) if caller is not None else None
        finally:
            del frame, caller
        if label is None:
            logger.warning("Source for check() call unavailable, labelling by value")
            label = repr(condition)
    return assert_check(label, condition)


@functools.lru_cache(maxsize=64)
def _parse_source(source: str) -> ast.Module | None:
    try:
        return ast.parse(source)
    except SyntaxError:
        return None


def _caller_argument_text(frame: FrameType) -> str | None:
    """Return the source of the first argument of the call executing in ``frame``."""
    positions = inspect.getframeinfo(frame, context=0).positions
    if positions is None or positions.lineno is None:
        return None

    source = "".join(linecache.getlines(frame.f_code.co_filename, frame.f_globals))
    if not source:
        return None
    tree = _parse_source(source)
    if tree is None:
        return None

    span = (positions.lineno, positions.col_offset, positions.end_lineno, positions.end_col_offset)
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        if (node.lineno, node.col_offset, node.end_lineno, node.end_col_offset) != span:
            continue
        argument = _condition_argument(node)
        if argument is None:
            return None
        segment = ast.get_source_segment(source, argument)
        return segment.strip() if segment else ast.unparse(argument)
    return None


def _condition_argument(call: ast.Call) -> ast.expr | None:
    if call.args and not isinstance(call.args[0], ast.Starred):
        return call.args[0]
    for keyword in call.keywords:
        if keyword.arg == "condition":
            return keyword.value
    return None
