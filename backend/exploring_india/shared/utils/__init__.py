"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and session cookie signing

Usage:
======
    from exploring_india.shared.utils.security import SecurityUtils
"""

from exploring_india.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
