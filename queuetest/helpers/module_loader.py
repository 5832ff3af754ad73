#!/usr/bin/env python3
"""
Test File Loader

Imports test files named on the command line. Importing a file runs its
top-level ``suite()`` / ``test()`` calls, which is all registration needs.
"""

from pathlib import Path
import importlib.util
import re
import sys
from types import ModuleType


def module_name_for(file_path: Path) -> str:
    """A module name that will not clash with installed packages."""
    stem = re.sub(r'\W', '_', file_path.stem)
    return f"queuetest_file_{stem}"


def load_test_module(file_path: Path) -> ModuleType:
    """Import a test file by path."""
    file_path = Path(file_path).resolve()
    if not file_path.is_file():
        raise FileNotFoundError(f"Test file not found: {file_path}")

    name = module_name_for(file_path)
    try:
        spec = importlib.util.spec_from_file_location(name, file_path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Could not load spec from {file_path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        # Let test files import helpers that sit next to them
        sys.path.insert(0, str(file_path.parent))
        try:
            spec.loader.exec_module(module)
        finally:
            sys.path.remove(str(file_path.parent))
        return module

    except Exception:
        sys.modules.pop(name, None)
        raise
