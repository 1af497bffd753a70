"""
jsoncomments core: the comment-stripping state machine.

This module provides the transition function, its stateful driver and the
one-shot helpers built on top of them.
"""

from .engine import load, loads, strip_comments
from .transducer import CommentStripper, LexState, Position, at_end_of_input, step

__all__ = [
    'step', 'at_end_of_input',
    'CommentStripper', 'LexState', 'Position',
    'strip_comments', 'loads', 'load',
]
