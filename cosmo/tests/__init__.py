"""Cross-module test suites."""
