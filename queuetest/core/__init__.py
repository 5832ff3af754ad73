#!/usr/bin/env python3
"""
Core modules of the queuetest framework.

This module exports the main framework components:
- TestRunner: registers, queues and runs tests, detects completion
- TestExecutor / TestContext: run one test body and its subtests
- ResultsAggregator: counts outcomes
- TestReporter: output log, console echo and reports
- TestEnvironment: runner settings and logging setup
"""

from .test_environment import TestEnvironment
from .test_execution import ExecutionStyle, TestContext, TestExecutor, TestResult
from .test_outcome import Outcome, TestOptions, classify
from .test_reporting import OutputEntry, TestReporter
from .test_results import ResultsAggregator
from .test_scheduling import RunState, SuiteRecord, TestRunner, TestTask

__all__ = [
    'ExecutionStyle',
    'Outcome',
    'OutputEntry',
    'ResultsAggregator',
    'RunState',
    'SuiteRecord',
    'TestContext',
    'TestEnvironment',
    'TestExecutor',
    'TestOptions',
    'TestReporter',
    'TestResult',
    'TestRunner',
    'TestTask',
    'classify'
]
