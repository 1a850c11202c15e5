"""
Tests package for vectorix.

unittest based; also collected by pytest.
"""

import os
import sys

# Allow running from a checkout without installing the package
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(project_root, "src"))


def load_tests(loader, tests, pattern):
    """unittest discovery entry point."""
    return loader.discover(
        os.path.join(project_root, "tests", "unit"),
        pattern=pattern or "test_*.py",
        top_level_dir=project_root,
    )
