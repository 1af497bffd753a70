"""
Byte constants used by the comment-stripping state machine.
"""

QUOTE = ord('"')
BACKSLASH = ord("\\")
SLASH = ord("/")
STAR = ord("*")
HASH = ord("#")
NEWLINE = ord("\n")

# One cached bytes object per byte value, so emitting never allocates
SINGLE_BYTES = tuple(bytes((value,)) for value in range(256))

EMPTY = b""
