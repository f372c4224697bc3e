from __future__ import annotations

import random
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from usernames.logging import logger
from usernames.schemas import DEFAULT_MAX_ATTEMPTS, GeneratorOptions
from usernames.words import ADJECTIVES, NOUNS


# Returns a uniform index in range(n).
IndexPicker = Callable[[int], int]


def _coerce_options(options: GeneratorOptions | Mapping[str, Any] | None) -> GeneratorOptions:
    if options is None:
        return GeneratorOptions()
    if isinstance(options, GeneratorOptions):
        return options
    return GeneratorOptions.model_validate(dict(options))


def _pick(words: Sequence[str], pick_index: IndexPicker) -> str:
    return words[pick_index(len(words))]


def generate_username(
    options: GeneratorOptions | Mapping[str, Any] | None = None,
    *,
    pick_index: IndexPicker | None = None,
) -> str | None:
    """
    Generate one username: `word_count - 1` adjectives followed by a noun.

    Candidates are drawn until one satisfies the length bounds, up to
    `max_attempts` draws. Returns None when the budget runs out.

    >>> generate_username()  # doctest: +SKIP
    'peaceful-ocean'
    >>> generate_username({"separator": "_", "wordCount": 3})  # doctest: +SKIP
    'silent_winter_wolf'
    """
    opts = _coerce_options(options)
    pick = pick_index or random.randrange
    adjectives = opts.custom_adjectives or ADJECTIVES
    nouns = opts.custom_nouns or NOUNS

    for _ in range(opts.max_attempts):
        words = [_pick(adjectives, pick) for _ in range(opts.word_count - 1)]
        words.append(_pick(nouns, pick))
        candidate = opts.separator.join(words)
        if opts.length_ok(candidate):
            return candidate
    return None


def generate_usernames(
    count: int,
    options: GeneratorOptions | Mapping[str, Any] | None = None,
    *,
    pick_index: IndexPicker | None = None,
) -> list[str]:
    """
    Generate up to `count` distinct usernames, in the order they were first produced.

    The loop is bounded by `count * max_attempts` calls to generate_username, so a
    short (or empty) list is a normal result when the word lists or length bounds
    cannot supply enough distinct names.
    """
    opts = _coerce_options(options)
    budget = count * (opts.max_attempts or DEFAULT_MAX_ATTEMPTS)

    accepted: dict[str, None] = {}
    attempts = 0
    while len(accepted) < count and attempts < budget:
        username = generate_username(opts, pick_index=pick_index)
        if username is not None:
            accepted.setdefault(username, None)
        attempts += 1

    if len(accepted) < count:
        logger.warning("username_batch_short", requested=count, produced=len(accepted), attempts=attempts)
    return list(accepted)
