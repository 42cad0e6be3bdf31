"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and immutability
    - session/: Submission guards, callbacks, observers
    - agent/: Agent configuration and completion calls

Uses mocks for external services when needed. Leverages pytest-check for
multiple assertions per test.
"""
