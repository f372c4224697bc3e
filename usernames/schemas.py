from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


DEFAULT_SEPARATOR = "-"
DEFAULT_WORD_COUNT = 2
DEFAULT_MAX_ATTEMPTS = 100


class GeneratorOptions(StrictModel):
    """
    Options accepted by generate_username / generate_usernames.

    Each option is accepted under its snake_case name and the camelCase name the
    web frontend sends (e.g. `wordCount`, `customAdjectives`).

    Numeric relationships are not validated:
    - word_count < 1 behaves like word_count == 1 (a single subject word).
    - min_length > max_length never matches; generation returns None.
    - Empty custom word lists fall back to the defaults.
    """

    separator: str = DEFAULT_SEPARATOR
    word_count: int = Field(
        default=DEFAULT_WORD_COUNT,
        validation_alias=AliasChoices("word_count", "wordCount"),
    )
    custom_adjectives: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("custom_adjectives", "customAdjectives", "descriptiveWords"),
    )
    custom_nouns: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("custom_nouns", "customNouns", "subjectWords"),
    )
    min_length: int = Field(default=0, validation_alias=AliasChoices("min_length", "minLength"))
    # None means unbounded.
    max_length: float | None = Field(default=None, validation_alias=AliasChoices("max_length", "maxLength"))
    max_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS,
        validation_alias=AliasChoices("max_attempts", "maxAttempts"),
    )

    def length_ok(self, candidate: str) -> bool:
        n = len(candidate)
        if n < self.min_length:
            return False
        return self.max_length is None or n <= self.max_length
