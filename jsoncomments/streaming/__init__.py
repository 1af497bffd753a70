"""
jsoncomments streaming support.

This module provides the pull-based reader for file-like sources.
"""

from .processor import StripComments

__all__ = ['StripComments']
