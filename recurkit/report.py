"""Running a single check against a function and reporting its outcome."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

SEPARATOR = "-" * 57


@dataclass(frozen=True)
class CheckResult:
    """Outcome of calling a function with given arguments and comparing results."""

    name: str
    args: tuple[Any, ...]
    expected: Any
    actual: Any

    @property
    def passed(self) -> bool:
        """True when the actual outcome matches the expected one."""
        if isinstance(self.expected, type) and issubclass(self.expected, BaseException):
            return isinstance(self.actual, self.expected)
        if isinstance(self.actual, BaseException):
            return False
        return self.actual == self.expected


def run_check(
    name: str,
    func: Callable[..., Any],
    args: Sequence[Any],
    expected: Any,
) -> CheckResult:
    """Call ``func(*args)`` and record the outcome against ``expected``.

    ``expected`` may be an exception class, in which case the check passes
    only if the call raises that exception; the raised instance becomes the
    actual outcome.
    """
    args = tuple(args)
    expects_error = isinstance(expected, type) and issubclass(expected, Exception)
    try:
        actual = func(*args)
    except Exception as error:
        if not expects_error:
            raise
        actual = error
    return CheckResult(name=name, args=args, expected=expected, actual=actual)


def format_values(values: Iterable[Any] | None) -> str:
    """Render a collection of values separated by single spaces."""
    if values is None:
        return ""
    return " ".join(str(value) for value in values)


def _describe(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, type) and issubclass(value, BaseException):
        return value.__name__
    if isinstance(value, BaseException):
        return f"{type(value).__name__}({value})"
    if isinstance(value, (list, tuple)):
        return f"[{format_values(value)}]"
    if value is None:
        return "none"
    return str(value)


def print_result(result: CheckResult, stream: TextIO | None = None) -> None:
    """Write a PASS/FAIL line for ``result``, with details when it failed."""
    out = sys.stdout if stream is None else stream
    status = "PASS" if result.passed else "FAIL"
    print(f"{result.name} --> {status}", file=out)
    if not result.passed:
        arguments = ", ".join(_describe(arg) for arg in result.args)
        print(f"Arguments: {arguments}", file=out)
        print(
            f"Expected = {_describe(result.expected)}, "
            f"but actual = {_describe(result.actual)}",
            file=out,
        )
    print(SEPARATOR, file=out)