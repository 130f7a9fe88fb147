"""Shared infrastructure for Word Scramble.

- utils: Common utilities (logging)
"""

__version__ = "0.1.0"
