"""
Test suite for the blog acceptance harness and its reference application.

This package contains:
- unit/: harness logic (seed client, runner, dialogs, settings) with mocks
- integration/: reference API tests through the Flask test client
- e2e/: browser tests and declarative scenarios driven by Playwright
"""
