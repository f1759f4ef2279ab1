"""
Package version information.

Version format: MAJOR.MINOR
- MAJOR: Breaking changes (0 while the model is still settling)
- MINOR: Incremented with each merged PR
"""

__version__ = "0.1"
