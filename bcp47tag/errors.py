"""Exception hierarchy for language tag handling."""

from __future__ import annotations

from collections.abc import Sequence


class BCP47Error(Exception):
    """Base class for every error raised by this package."""


class ParseError(BCP47Error):
    """Raised when a locale string cannot be split into subtags."""


class RegistryLoadError(BCP47Error):
    """Raised when the subtag registry snapshot is missing or malformed."""


class RegistryValidationError(BCP47Error):
    """Raised when a parsed tag contains subtags unknown to the registry."""

    def __init__(self, message: str, invalid: Sequence[tuple[str, str]] = ()) -> None:
        super().__init__(message)
        self.invalid = tuple(invalid)


class NoCanonicalMatchError(BCP47Error):
    """Raised when no candidate tag shares the subject's language."""

    def __init__(
        self,
        subject: str,
        candidates: Sequence[str],
        rejected: Sequence[str] = (),
    ) -> None:
        message = (
            f'No canonical tag matches "{subject}" among: {", ".join(candidates) or "(none)"}.'
        )
        if rejected:
            message += f' Rejected invalid candidates: {", ".join(rejected)}.'
        super().__init__(message)
        self.subject = subject
        self.candidates = tuple(candidates)
        self.rejected = tuple(rejected)


class TagError(BCP47Error, ValueError):
    """Base class for failures raised while constructing a BCP47Tag."""


class InvalidArgumentError(TagError):
    """Raised when the constructor arguments contradict each other."""


class InvalidLocaleError(TagError):
    """Raised when the locale is invalid and no fallback was given."""

    def __init__(self, locale: str) -> None:
        super().__init__(f'Invalid locale format: "{locale}".')
        self.locale = locale


class InvalidFallbackLocaleError(TagError):
    """Raised when both the locale and its fallback are invalid."""

    def __init__(self, locale: str, fallback: str) -> None:
        super().__init__(
            f'Both locale "{locale}" and fallback locale "{fallback}" are invalid.'
        )
        self.locale = locale
        self.fallback = fallback


class InvalidMatchingTagError(TagError):
    """Raised when a valid tag matches none of the canonical candidates."""

    def __init__(self, tag: str, candidates: Sequence[str]) -> None:
        super().__init__(
            f'No canonical tag matches "{tag}" among: {", ".join(candidates) or "(none)"}.'
        )
        self.tag = tag
        self.candidates = tuple(candidates)
