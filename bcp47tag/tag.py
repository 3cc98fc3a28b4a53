"""BCP47Tag: normalize, validate and optionally canonicalize a locale in one step."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .config import ALT_SEPARATOR, TAG_SEPARATOR
from .errors import (
    InvalidArgumentError,
    InvalidFallbackLocaleError,
    InvalidLocaleError,
    InvalidMatchingTagError,
    NoCanonicalMatchError,
    ParseError,
    TagError,
)
from .models import LanguageTag
from .normalizer import normalize
from .parser import find_known_tag, normalize_tags, parse_tag
from .registry import SubtagRegistry, load_registry
from .resolver import resolve_canonical

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, init=False)
class BCP47Tag:
    """A validated language tag built from raw, possibly sloppy, input.

    The locale is normalized, parsed and checked against the subtag registry.
    When it is invalid the ``fallback`` is tried instead. When
    ``canonical_candidates`` is given, the result is replaced by the best
    matching candidate, so ``en`` with ``["en-US", "en-GB"]`` becomes ``en-US``.

    All failures are subclasses of ``TagError``:

    * ``InvalidArgumentError``: ``fallback`` is not one of ``canonical_candidates``.
    * ``InvalidLocaleError``: the locale is invalid and there is no fallback.
    * ``InvalidFallbackLocaleError``: the locale and the fallback are both invalid.
    * ``InvalidMatchingTagError``: no candidate shares the tag's language.
    """

    original_input: str
    tag: LanguageTag

    def __init__(
        self,
        locale: str,
        fallback: str | None = None,
        canonical_candidates: Sequence[str] | None = None,
        *,
        registry: SubtagRegistry | None = None,
        require_region: bool = False,
        require_script: bool = False,
    ) -> None:
        if registry is None:
            registry = load_registry()

        if fallback is not None and canonical_candidates is not None:
            known = normalize_tags(canonical_candidates, registry)
            if find_known_tag(normalize(fallback, registry), known) is None:
                raise InvalidArgumentError(
                    f'Fallback locale "{fallback}" must be one of the canonical '
                    f'candidates: {", ".join(canonical_candidates) or "(none)"}.'
                )

        working = _parse_and_validate(
            locale, registry, require_region=require_region, require_script=require_script
        )
        if working is None:
            if fallback is None:
                raise InvalidLocaleError(locale)
            working = _parse_and_validate(
                fallback,
                registry,
                require_region=require_region,
                require_script=require_script,
            )
            if working is None:
                raise InvalidFallbackLocaleError(locale, fallback)
            logger.debug("Locale %r is invalid, using fallback %s", locale, working)

        if canonical_candidates is not None:
            try:
                working = resolve_canonical(working, canonical_candidates, registry)
            except NoCanonicalMatchError as e:
                raise InvalidMatchingTagError(
                    str(working), list(canonical_candidates)
                ) from e

        object.__setattr__(self, "original_input", locale)
        object.__setattr__(self, "tag", working)

    @classmethod
    def try_parse(cls, locale: str, *args: Any, **kwargs: Any) -> BCP47Tag | None:
        """Build a tag like the constructor does, returning None instead of raising TagError."""
        try:
            return cls(locale, *args, **kwargs)
        except TagError as e:
            logger.debug("Could not build tag from %r: %s", locale, e)
            return None

    @property
    def language(self) -> str:
        return self.tag.language

    @property
    def script(self) -> str | None:
        return self.tag.script

    @property
    def region(self) -> str | None:
        return self.tag.region

    @property
    def variants(self) -> tuple[str, ...]:
        return self.tag.variants

    @property
    def normalized(self) -> str:
        """Canonical form, ``language[-Script][-REGION]``, without variants."""
        return str(self.tag)

    @property
    def with_variants(self) -> str:
        return self.tag.with_variants()

    @property
    def underscored(self) -> str:
        return self.normalized.replace(TAG_SEPARATOR, ALT_SEPARATOR)

    @property
    def lowercase(self) -> str:
        return self.normalized.lower()

    @property
    def uppercase(self) -> str:
        return self.normalized.upper()

    @property
    def lowercase_underscored(self) -> str:
        return self.underscored.lower()

    @property
    def uppercase_underscored(self) -> str:
        return self.underscored.upper()

    def to_dict(self) -> dict[str, Any]:
        return self.tag.to_dict()

    def __str__(self) -> str:
        return self.normalized


def _parse_and_validate(
    locale: str,
    registry: SubtagRegistry,
    *,
    require_region: bool,
    require_script: bool,
) -> LanguageTag | None:
    try:
        parsed = parse_tag(locale, registry)
    except ParseError as e:
        logger.debug("Cannot parse locale %r: %s", locale, e)
        return None

    if not registry.is_valid_parsed_tag(
        parsed, require_region=require_region, require_script=require_script
    ):
        return None
    return LanguageTag.from_parsed_tag(parsed, registry)
