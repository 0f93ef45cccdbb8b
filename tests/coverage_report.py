# File: tests/coverage_report.py
#!/usr/bin/env python3
"""
Generate test coverage report for the Garage Advisor.
Requires: pip install -e .[test]
"""

import sys
from pathlib import Path

import coverage

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def generate_coverage_report():
    """Generate test coverage report"""
    cov = coverage.Coverage(
        source=['garage_advisor'],
        omit=['*/tests/*', '*/__pycache__/*']
    )
    cov.start()

    try:
        from tests.run_tests import run_all_tests
        result = run_all_tests()
    finally:
        cov.stop()
        cov.save()

    print("\n" + "=" * 60)
    print("Test Coverage Report")
    print("=" * 60)

    print("\nConsole Report:")
    cov.report()

    print("\nGenerating HTML report...")
    cov.html_report(directory='htmlcov')
    print("HTML report generated in 'htmlcov' directory")

    print("\nGenerating XML report...")
    cov.xml_report(outfile='coverage.xml')
    print("XML report generated as 'coverage.xml'")

    return result


if __name__ == "__main__":
    result = generate_coverage_report()
    sys.exit(0 if result.wasSuccessful() else 1)
