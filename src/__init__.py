"""Playwright end-to-end browser suite."""
