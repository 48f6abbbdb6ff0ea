"""Pydantic models for configuration schema."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_FILE = ".patch_speller.yml"
DEFAULT_FILES_TO_LINT = r"\.rb$"
DEFAULT_LANGUAGE = "en_US"
DEFAULT_SUGGESTION_MODE = "fast"
DEFAULT_MIN_WORD_LENGTH = 5
DEFAULT_MAX_SUGGESTIONS = 3


def _check_pattern(pattern: str) -> str:
    try:
        re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise ValueError(f"Invalid pattern {pattern!r}: {e}") from e
    return pattern


class SpellConfig(BaseModel):
    """Per-repository spelling configuration, as written in the YAML file."""

    model_config = ConfigDict(extra="ignore")

    whitelist: list[str] = []
    files_to_lint: str = DEFAULT_FILES_TO_LINT
    ignored_words: list[str] = []
    only_lines_matching: list[str] = []
    language: str = DEFAULT_LANGUAGE
    suggestion_mode: str = DEFAULT_SUGGESTION_MODE
    min_word_length: int = Field(DEFAULT_MIN_WORD_LENGTH, ge=0)
    max_word_length: int | None = Field(None, ge=0, description="None means unbounded")
    max_suggestions_number: int = Field(DEFAULT_MAX_SUGGESTIONS, ge=0)

    @field_validator("whitelist", "ignored_words", "only_lines_matching", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """Treat an explicitly empty YAML key as an empty list."""
        return [] if v is None else v

    @field_validator("files_to_lint", "language", "suggestion_mode", mode="before")
    @classmethod
    def none_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat an explicitly empty YAML key as the default value."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("whitelist", "only_lines_matching")
    @classmethod
    def validate_pattern_list(cls, v: list[str]) -> list[str]:
        """Validate that every entry compiles as a regular expression."""
        for pattern in v:
            _check_pattern(pattern)
        return v

    @field_validator("files_to_lint")
    @classmethod
    def validate_files_to_lint(cls, v: str) -> str:
        """Validate that the file pattern compiles as a regular expression."""
        return _check_pattern(v)

    @model_validator(mode="after")
    def check_length_bounds(self) -> SpellConfig:
        """Validate that the word length range is not empty."""
        if self.max_word_length is not None and self.max_word_length < self.min_word_length:
            raise ValueError(
                f"max_word_length ({self.max_word_length}) must not be less than "
                f"min_word_length ({self.min_word_length})"
            )
        return self


@dataclass(frozen=True)
class FilterConfig:
    """Resolved, immutable filter parameters for one run.

    Patterns are compiled once, case-insensitively. Build instances with
    resolve_filter_config() rather than by hand.
    """

    whitelist: tuple[re.Pattern[str], ...] = ()
    ignored_words: frozenset[str] = frozenset()
    keywords: tuple[str, ...] = ()
    keyword_pattern: re.Pattern[str] | None = None
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH
    max_word_length: int | None = None
    language: str = DEFAULT_LANGUAGE
    suggestion_mode: str = DEFAULT_SUGGESTION_MODE
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    file_pattern: re.Pattern[str] = field(
        default_factory=lambda: re.compile(DEFAULT_FILES_TO_LINT, re.IGNORECASE)
    )

    @classmethod
    def from_spell_config(cls, config: SpellConfig) -> FilterConfig:
        """Compile a validated SpellConfig into filter parameters."""
        keywords = tuple(dict.fromkeys(k.lower() for k in config.only_lines_matching))
        keyword_pattern = re.compile("|".join(keywords), re.IGNORECASE) if keywords else None

        return cls(
            whitelist=tuple(re.compile(p, re.IGNORECASE) for p in config.whitelist),
            ignored_words=frozenset(w.lower() for w in config.ignored_words),
            keywords=keywords,
            keyword_pattern=keyword_pattern,
            min_word_length=config.min_word_length,
            max_word_length=config.max_word_length,
            language=config.language,
            suggestion_mode=config.suggestion_mode,
            max_suggestions=config.max_suggestions_number,
            file_pattern=re.compile(config.files_to_lint, re.IGNORECASE),
        )


class SpellerSettings(BaseSettings):
    """Process-level settings, read from PATCH_SPELLER_* environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "console"] = "console"
    log_file: Path | None = None
    config_file: str = DEFAULT_CONFIG_FILE
    git_timeout: int = Field(60, ge=1, le=600, description="Timeout for git commands in seconds")

    model_config = SettingsConfigDict(
        env_prefix="PATCH_SPELLER_",
        env_file=".env",
        extra="ignore",
    )
