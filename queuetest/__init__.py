#!/usr/bin/env python3
"""
queuetest - a small test runner with suites, subtests and async support.

The module-level functions act on a shared default runner, so a test file
only needs::

    from queuetest import describe, it

    describe('math', lambda: it('adds', lambda t: None))

Create a ``TestRunner`` for an independent run.
"""

from .core import (
    ExecutionStyle,
    Outcome,
    TestContext,
    TestEnvironment,
    TestRunner,
)

__version__ = '0.1.0'

default_runner = TestRunner()

suite = default_runner.suite
describe = default_runner.describe
test = default_runner.test
it = default_runner.it


def get_results():
    return default_runner.get_results()


def get_summary():
    return default_runner.get_summary()


def on_complete(handler):
    default_runner.on_complete(handler)


async def wait_for_completion():
    return await default_runner.wait_for_completion()


def run():
    return default_runner.run()


def reset():
    default_runner.reset()


__all__ = [
    'ExecutionStyle',
    'Outcome',
    'TestContext',
    'TestEnvironment',
    'TestRunner',
    'default_runner',
    'describe',
    'get_results',
    'get_summary',
    'it',
    'on_complete',
    'reset',
    'run',
    'suite',
    'test',
    'wait_for_completion'
]
