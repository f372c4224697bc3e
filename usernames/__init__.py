"""
Random human-readable usernames built from adjective and noun word lists.

- `generate_username` returns a single name (or None when the length bounds can't be met).
- `generate_usernames` returns a batch of distinct names.
"""

from __future__ import annotations

from usernames.generator import generate_username, generate_usernames
from usernames.schemas import GeneratorOptions
from usernames.words import ADJECTIVES, NOUNS

__all__ = [
    "ADJECTIVES",
    "NOUNS",
    "GeneratorOptions",
    "generate_username",
    "generate_usernames",
]
