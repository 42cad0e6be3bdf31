"""Test package for AI Chat Assistant.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP host and live model tests

Uses a scripted completion provider for session tests. No mocks in
integration tests. Leverages pytest with pytest-check for soft assertions.
"""
