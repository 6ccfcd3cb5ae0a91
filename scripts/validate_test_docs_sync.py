#!/usr/bin/env python3
"""
Validate that test_scenarios_business_summary.md stays in sync with test_integration_scenarios.py.

This script checks:
1. All test classes in the test file are documented
2. All test methods are referenced in the doc
3. Warns about documented tests that no longer exist

Run: python scripts/validate_test_docs_sync.py
"""

import sys
from pathlib import Path

# Share the parsing helpers with the pytest check
sys.path.insert(0, str(Path(__file__).parent.parent))

from tests.test_docs_sync import extract_documented_tests, extract_test_classes_and_methods


def main():
    project_root = Path(__file__).parent.parent

    test_file = project_root / 'tests' / 'test_integration_scenarios.py'
    doc_file = project_root / 'docs' / 'test_scenarios_business_summary.md'

    for path in (test_file, doc_file):
        if not path.exists():
            print(f"❌ File not found: {path}")
            sys.exit(1)

    test_classes = extract_test_classes_and_methods(test_file)
    doc_classes, doc_methods = extract_documented_tests(doc_file)

    all_test_methods = set()
    for methods in test_classes.values():
        all_test_methods.update(methods)

    errors = [f"Missing class documentation: {cls}" for cls in set(test_classes) - doc_classes]
    errors += [f"Missing method documentation: {m}" for m in all_test_methods - doc_methods]
    warnings = [f"Documented class no longer exists: {cls}" for cls in doc_classes - set(test_classes)]
    warnings += [f"Documented method no longer exists: {m}" for m in doc_methods - all_test_methods]

    print("=" * 60)
    print("Test Documentation Sync Validation")
    print("=" * 60)
    print(f"\nTest classes found: {len(test_classes)}")
    print(f"Test methods found: {len(all_test_methods)}")
    print(f"Documented classes: {len(doc_classes)}")
    print(f"Documented methods: {len(doc_methods)}")

    if errors:
        print(f"\n❌ ERRORS ({len(errors)}):")
        for error in sorted(errors):
            print(f"   - {error}")

    if warnings:
        print(f"\n⚠️  WARNINGS ({len(warnings)}):")
        for warning in sorted(warnings):
            print(f"   - {warning}")

    if not errors and not warnings:
        print("\n✅ All tests are documented and in sync!")

    print("\n" + "=" * 60)

    sys.exit(1 if errors else 0)


if __name__ == '__main__':
    main()
