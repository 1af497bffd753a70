"""
jsoncomments configuration helpers.
"""

from .config import DecodeSettings, StreamSettings, StripConfig

__all__ = ['StripConfig', 'StreamSettings', 'DecodeSettings']
