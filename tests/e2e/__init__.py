"""
Browser test package for the blog application.

This package contains Playwright-based acceptance tests and demonstrates:
- Page Object Model (POM) pattern
- API-level reset and seeding before every test
- Declarative scenarios executed by a runner
- Locator strategies using visible text and data-testid attributes
"""
