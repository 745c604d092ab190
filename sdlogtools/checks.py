"""A small reporter that prints pass/fail lines and keeps a tally."""

from __future__ import annotations

import sys
from typing import TextIO

_RESULT_COLUMN = 60


class CheckReporter:
    """Prints one aligned line per check and counts the failures."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = sys.stdout if out is None else out
        self.test_count = 0
        self.fail_count = 0

    def begin(self) -> None:
        """Start a new run with zeroed counters."""
        self.test_count = 0
        self.fail_count = 0

    def end(self) -> bool:
        """Print the totals; return True when no check failed."""
        self.out.write("\n")
        self.out.write(f"Test count: {self.test_count}\n")
        self.out.write(f"Fail count: {self.fail_count}\n")
        return self.fail_count == 0

    def _result(self, ok: bool, width: int) -> bool:
        width &= 0xFF
        self.out.write(" " * max(0, _RESULT_COLUMN - width))
        if ok:
            self.out.write("..ok\n")
        else:
            self.out.write("FAIL\n")
            self.fail_count += 1
        self.test_count += 1
        return ok

    def verify(self, ok, message: str) -> bool:
        """Report a check described by ``message``."""
        self.out.write(message)
        return self._result(bool(ok), len(message) + 1)

    def verify_str(self, result: str, expect: str) -> bool:
        """Report whether ``result`` equals ``expect``."""
        self.out.write(f'"{result}","{expect}"')
        return self._result(result == expect, len(result) + len(expect) + 1 + 5)