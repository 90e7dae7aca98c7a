# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-26
# Description: TestRunner
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from utility.logging_utils import get_class_logger


class TestRunner:
    """
    Orchestrates all smoke tests and reports a consolidated result.

    Each check is a zero-arg callable returning True/False; a check that
    raises is recorded as a failure.
    """
    __test__ = False  # not a pytest test class

    def __init__(self, checks: Dict[str, Callable[[], bool]], logger: Optional[logging.Logger] = None):
        self.checks = dict(checks)
        self.logger = logger or get_class_logger(self.__class__)

    # -------------------------------------------------------------------------
    def run_all(self) -> Dict[str, bool]:
        self.logger.info("Starting smoke test suite (%d checks)", len(self.checks))

        results: Dict[str, bool] = {}
        for name, check in self.checks.items():
            try:
                ok = bool(check())
            except Exception as e:
                self.logger.exception("%s raised an exception: %s", name, e)
                ok = False
            results[name] = ok
            self._log_result(name, ok)

        self._log_summary(results)
        return results

    # -------------------------------------------------------------------------
    def _log_result(self, name: str, ok: bool) -> None:
        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)

    def _log_summary(self, results: Dict[str, bool]) -> None:
        total = len(results)
        passed = sum(1 for v in results.values() if v)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)
