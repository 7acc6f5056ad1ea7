"""
Routes package for the reference blog application.

This package contains route blueprints:
- api: REST API for users, login and blogs
- testing: state reset used by the browser suite
- views: the single-page UI
"""
