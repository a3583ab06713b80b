"""
Conformance test runner for the Python LIVR implementation.

Loads the shared YAML fixtures and checks that the Validator produces the
expected output record or error map for every case.
"""

import sys
from pathlib import Path
from typing import Any

import yaml

# Add the package root to path
PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(PACKAGE_ROOT))

from livr import Validator, ValidatorOptions
from livr.utils.logger import SilentLogger


FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"


def run_case(case: dict[str, Any]) -> tuple[bool, str]:
    """Run a single test case. Returns (passed, message)."""
    validator = Validator(
        case["rules"],
        ValidatorOptions(auto_trim=case.get("auto_trim", False)),
        logger=SilentLogger(),
    )

    result = validator.validate(case["input"])
    expected = case["expected"]
    errors: list[str] = []

    if "output" in expected:
        if result is False:
            errors.append(f"expected success, got errors {validator.get_errors()!r}")
        elif result != expected["output"]:
            errors.append(f"output: got {result!r}, expected {expected['output']!r}")

    if "errors" in expected:
        if result is not False:
            errors.append(f"expected errors, got output {result!r}")
        elif validator.get_errors() != expected["errors"]:
            errors.append(
                f"errors: got {validator.get_errors()!r}, "
                f"expected {expected['errors']!r}"
            )

    if errors:
        return False, "; ".join(errors)
    return True, "ok"


def run_suite(filepath: Path) -> tuple[int, int, list[str]]:
    """Run all cases in a fixture file. Returns (passed, failed, failure_details)."""
    with open(filepath) as f:
        suite = yaml.safe_load(f)

    passed = 0
    failed = 0
    failures: list[str] = []

    for case in suite["cases"]:
        ok, msg = run_case(case)
        if ok:
            passed += 1
        else:
            failed += 1
            failures.append(f"  FAIL {case['id']}: {msg}")

    return passed, failed, failures


def main() -> int:
    fixture_files = sorted(FIXTURES_DIR.glob("*.yaml"))
    if not fixture_files:
        print(f"No fixture files found in {FIXTURES_DIR}")
        return 1

    total_passed = 0
    total_failed = 0
    all_failures: list[str] = []

    for filepath in fixture_files:
        passed, failed, failures = run_suite(filepath)
        total_passed += passed
        total_failed += failed

        status = "PASS" if failed == 0 else "FAIL"
        print(f"  {status} {filepath.name} ({passed} passed, {failed} failed)")

        if failures:
            all_failures.extend(failures)

    print()
    print(f"Total: {total_passed} passed, {total_failed} failed")

    if all_failures:
        print()
        print("Failures:")
        for f in all_failures:
            print(f)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
