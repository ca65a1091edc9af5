#!/usr/bin/env python3
"""
Main test runner for astsketch.

Builds the sample snippet of every dialect, prints its tree, then runs the
unittest suite under tests/.

Author: astsketch maintainers
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_samples():
    """Build and print the sample snippet of every dialect."""
    try:
        from astsketch import Dialect, build_with_diagnostics, format_tree, get_dialect_spec
        print("✅ astsketch imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import astsketch: {e}")
        return False

    for dialect in Dialect:
        sample = get_dialect_spec(dialect).sample
        print(f"  📝 {dialect.value} sample")
        result = build_with_diagnostics(sample, dialect)
        node_count = sum(1 for _ in result.tree.walk())
        print(f"     {node_count} nodes, {len(result.diagnostics)} diagnostics")
        print(format_tree(result.tree, indent="     "))
        print()

    return True


def run_all_tests():
    """Run the sample smoke check and the full unit test suite."""

    print("🚀 astsketch Test Suite")
    print("=" * 60)

    if not run_samples():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)

    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
