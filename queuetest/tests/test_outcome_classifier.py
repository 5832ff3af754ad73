#!/usr/bin/env python3
"""
Outcome Classifier Tests

How options and execution errors map to the four outcome buckets.
"""

import pytest

import queuetest.core as core


@pytest.mark.classifier
class TestClassify:
    """Tests for classify()."""

    def test_clean_run_passes(self):
        assert core.classify(core.TestOptions()) is core.Outcome.PASSED

    def test_error_fails(self):
        assert core.classify(core.TestOptions(), AssertionError('nope')) is core.Outcome.FAILED

    def test_skip_wins_over_everything(self):
        options = core.TestOptions(skip=True, todo=True)
        assert core.classify(options) is core.Outcome.SKIPPED
        assert core.classify(options, RuntimeError('x')) is core.Outcome.SKIPPED

    def test_todo_is_never_a_failure(self):
        options = core.TestOptions(todo=True)
        assert core.classify(options) is core.Outcome.TODO
        assert core.classify(options, ValueError('broken')) is core.Outcome.TODO

    def test_options_default_to_false_and_are_read_only(self):
        options = core.TestOptions()
        assert not options.skip
        assert not options.todo
        with pytest.raises(AttributeError):
            options.skip = True

    def test_options_compare_by_value(self):
        assert core.TestOptions(todo=True) == core.TestOptions(todo=True)
        assert core.TestOptions(skip=True) != core.TestOptions(todo=True)
