"""
API test package for the reference blog application.

This package contains tests for the REST endpoints the browser suite
relies on. Tests use the Flask test client and demonstrate:
- Status code and response body validation
- Token-protected endpoints
- Owner-only deletion
- The testing reset endpoint
"""
