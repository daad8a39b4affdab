"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations built on the harness session.

Each page class encapsulates:
    - Element selectors
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .page_base import BasePage, PageBase

__all__ = [
    "BasePage",
    "LoginPage",
    "PageBase",
]
