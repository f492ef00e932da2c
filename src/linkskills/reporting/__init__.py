"""Human-readable output for linking runs."""

from .stdout import StdoutReporter, should_use_color

__all__ = ["StdoutReporter", "should_use_color"]
