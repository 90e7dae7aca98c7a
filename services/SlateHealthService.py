# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-26
# Description: SlateHealthService.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass

from health.TestRunner import TestRunner
from api.schemas.health import DeepHealthResponse, SmokeTestSummary


@dataclass
class SlateHealthService:
    """
    Wraps TestRunner (embedding model + vector store smoke tests).
    Returns DeepHealthResponse for API layer
    """

    test_runner: TestRunner

    def deep_health(self) -> DeepHealthResponse:
        results = self.test_runner.run_all()

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            results=results,
            summary=SmokeTestSummary(total=total, passed=passed, failed=failed),
        )
