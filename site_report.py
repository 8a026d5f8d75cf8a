import sys

PASS = "✓"
FAIL = "✗"
WARN = "⚠"


def exit_code(result):
    """0 when every finding passed, 1 otherwise."""
    return 0 if result.passed else 1


class Reporter:
    """Prints the run as it happens, then the results block."""

    def __init__(self, stream=None, err_stream=None):
        self.stream = stream
        self.err_stream = err_stream

    def _print(self, line=""):
        print(line, file=self.stream or sys.stdout)

    def page_loaded(self):
        self._print(f"{PASS} Page loaded successfully")

    def finding(self, finding):
        if finding.passed:
            self._print(f"{PASS} {finding.label} found")
        else:
            self._print(f"{FAIL} {finding.detail}")

    def counts(self, result):
        self._print(f"{PASS} Found {result.image_count} images")
        self._print(f"{PASS} Found {result.nav_link_count} navigation links")

    def navigation_failed(self, error):
        print(f"Test failed: {error}", file=self.err_stream or sys.stderr)

    def summary(self, result):
        self._print()
        self._print("--- Test Results ---")

        failures = result.failures
        if not failures:
            self._print(f"{PASS} All tests passed! No errors detected.")
        else:
            self._print(f"{FAIL} {len(failures)} error(s) found:")
            for finding in failures:
                self._print(f"  - {finding.detail}")

        errors = result.errors
        if errors:
            self._print(f"{FAIL} {len(errors)} console error(s) reported:")
            for diagnostic in errors:
                self._print(f"  - {diagnostic.message}")

        warnings = result.warnings
        if warnings:
            self._print(f"{WARN} {len(warnings)} warning(s):")
            for diagnostic in warnings:
                self._print(f"  - {diagnostic.message}")

        return exit_code(result)
