#!/usr/bin/env python3
"""
queuetest command line entry point.

Loads the given test files into the default runner, runs everything they
registered, and exits non-zero when any test failed.
"""

from pathlib import Path
import sys
import time

from typing import Any, Dict, List, Optional
import argparse

from . import default_runner
from .core.test_environment import DEFAULT_GRACE_PERIOD, TestEnvironment
from .core.test_scheduling import TestRunner
from .helpers.module_loader import load_test_module


class MainTestRunner:
    """
    Main test runner orchestrating a command line run.

    Test files register their tests on the shared default runner when they
    are imported, so that runner is the one configured and run here.
    """

    def __init__(self, environment: TestEnvironment, runner: Optional[TestRunner] = None):
        """Initialize the main test runner."""
        self.environment = environment
        self.verbose = environment.verbose
        self.quiet = environment.quiet
        self.runner = runner or default_runner
        self.runner.configure(environment)
        self.results: Dict[str, Any] = {}

    def run_tests(self, test_files: List[Path], json_report: Optional[Path] = None,
                  log_level: str = 'INFO') -> bool:
        """Load, run and report. Returns True when no test failed."""
        start_time = time.time()

        if not self.environment.verify_python_environment():
            return False
        if not self.environment.setup_logging(log_level):
            return False
        self._log_debug(f"Environment: {self.environment.get_system_info()}")

        try:
            if not self.load_test_files(test_files):
                return False

            self.results = self.runner.run()
            summary = self.runner.get_summary()
            self._log_debug(f"Run finished in {time.time() - start_time:.2f}s")

            if json_report is not None:
                self.runner.reporter.generate_json_report(self.results, json_report)

            return summary['success']
        finally:
            self.environment.close_logging()

    def load_test_files(self, test_files: List[Path]) -> bool:
        """Import every file; stop at the first one that fails to import."""
        for test_file in test_files:
            self._log_debug(f"Loading {test_file}")
            try:
                load_test_module(test_file)
            except FileNotFoundError as error:
                self._log_error(str(error))
                return False
            except Exception as error:  # pylint: disable=broad-except
                self._log_error(f"Could not load test file {test_file}: {error}")
                return False
        return True

    def _log_error(self, message: str) -> None:
        """Log error message."""
        print(f"[ERROR] {message}", file=sys.stderr)

    def _log_debug(self, message: str) -> None:
        """Log debug message."""
        if self.verbose:
            print(f"[DEBUG] {message}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='queuetest',
        description="queuetest - run test files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m queuetest tests/math_test.py              # Run one file
  python -m queuetest a_test.py b_test.py --quiet     # Failures only
  python -m queuetest a_test.py --json-report out.json
  python -m queuetest a_test.py --log-dir logs --log-level DEBUG
        """
    )

    parser.add_argument('files', type=Path, nargs='+', metavar='FILE',
                        help='Test files to load, in order')
    parser.add_argument('--grace-period', type=float, default=DEFAULT_GRACE_PERIOD, metavar='SECONDS',
                        help='How long the queue must stay empty before the run is complete')
    parser.add_argument('--json-report', type=Path, metavar='PATH',
                        help='Write results as JSON to PATH')
    parser.add_argument('--log-dir', type=Path, metavar='DIR',
                        help='Also write a timestamped log file into DIR')
    parser.add_argument('--log-level', default='INFO',
                        help='Level for the log file (default: INFO)')
    color_group = parser.add_mutually_exclusive_group()
    color_group.add_argument('--color', dest='color', action='store_true', default=None,
                             help='Force coloured output')
    color_group.add_argument('--no-color', dest='color', action='store_false',
                             help='Disable coloured output')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Quiet output (failures only)')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for test execution."""
    args = build_parser().parse_args(argv)

    try:
        environment = TestEnvironment(
            verbose=args.verbose,
            quiet=args.quiet,
            color=args.color,
            grace_period=args.grace_period,
            logs_dir=args.log_dir
        )
        runner = MainTestRunner(environment)
        success = runner.run_tests(args.files, json_report=args.json_report, log_level=args.log_level)
        sys.exit(0 if success else 1)

    except KeyboardInterrupt:
        print("\n[INFO] Test execution interrupted by user")
        sys.exit(1)
    except ValueError as error:
        print(f"[ERROR] {error}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
