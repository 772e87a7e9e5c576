# member_scout/__init__.py
"""
MemberScout package initializer.
Defines package version; the CLI lives in :mod:`member_scout.cli`.
"""
__version__ = "0.1.0"
