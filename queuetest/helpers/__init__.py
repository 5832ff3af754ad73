#!/usr/bin/env python3
"""
Helper modules for the queuetest command line runner.

- load_test_module: import a test file by path
"""

from .module_loader import load_test_module, module_name_for

__all__ = [
    'load_test_module',
    'module_name_for'
]
