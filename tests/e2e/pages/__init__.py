"""Page objects for the blog application UI."""

from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.blog_list_page import BlogListPage
from tests.e2e.pages.login_page import LoginPage

__all__ = ["BasePage", "BlogListPage", "LoginPage"]
