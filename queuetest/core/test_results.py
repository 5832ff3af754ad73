#!/usr/bin/env python3
"""
Test Results Module

Running counters for one test run plus the per-test records behind them.
"""

from typing import Any, Dict, List

from .test_execution import TestResult
from .test_outcome import Outcome


class ResultsAggregator:
    """Counts finished tests by outcome."""

    def __init__(self):
        self._counters: Dict[str, int] = {}
        self.results: List[TestResult] = []
        self.reset()

    def record(self, result: TestResult) -> None:
        """Count a finished test. Each test must be recorded exactly once."""
        if result.outcome is None:
            raise ValueError(f"Test '{result.test_name}' has not finished")
        self._counters[result.outcome.value] += 1
        self.results.append(result)

    def counters(self) -> Dict[str, int]:
        """Copy of the four raw counters."""
        return dict(self._counters)

    def snapshot(self) -> Dict[str, Any]:
        """Summary statistics with derived total and success flag."""
        passed = self._counters[Outcome.PASSED.value]
        failed = self._counters[Outcome.FAILED.value]
        skipped = self._counters[Outcome.SKIPPED.value]
        todo = self._counters[Outcome.TODO.value]

        return {
            'total': passed + failed + skipped + todo,
            'passed': passed,
            'failed': failed,
            'skipped': skipped,
            'todo': todo,
            'success': failed == 0
        }

    def reset(self) -> None:
        """Zero every counter and drop the recorded results."""
        self._counters = {outcome.value: 0 for outcome in Outcome}
        self.results = []
