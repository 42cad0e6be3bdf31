"""Integration tests for components working together as a system.

No mocks for core functionality - tests real interactions.

Coverage:
    - API endpoints with real HTTP requests
    - Conversation session driving the real agent service (when configured)

External services may be required. Live model tests are skipped unless an
API key is set in the environment.
"""
