"""Positional decomposition of locale strings into subtags.

Only the language, script, region and variant subtags are understood.
Extension (``-u-...``, ``-t-...``) and private-use (``-x-...``) sequences are
rejected rather than carried along unvalidated.

See https://www.rfc-editor.org/rfc/rfc5646.html#section-2.1
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import TAG_SEPARATOR
from .errors import ParseError
from .models import ParsedTag
from .normalizer import normalize
from .registry import SubtagRegistry, load_registry


def is_script(part: str) -> bool:
    return len(part) == 4 and part.isascii() and part.isalpha()


def is_region(part: str) -> bool:
    if not part.isascii():
        return False
    return (len(part) == 2 and part.isalpha()) or (len(part) == 3 and part.isdigit())


def parse_tag(locale: str, registry: SubtagRegistry | None = None) -> ParsedTag:
    """Parse a locale string such as ``en-US`` or ``zh-Hans-CN`` into a ParsedTag.

    Script and region are only recognized at their fixed positions; anything
    after them is kept as variants, in order.

    Raises:
        ParseError: If the locale is empty or not made of plain subtags.
    """
    if registry is None:
        registry = load_registry()
    normalized = normalize(locale, registry)
    if not normalized:
        raise ParseError("Empty locale.")

    grandfathered = registry.grandfathered_form(normalized)
    if grandfathered is not None:
        return ParsedTag(language=grandfathered)

    parts = normalized.split(TAG_SEPARATOR)
    if not all(parts):
        raise ParseError(f'Empty subtag in locale "{locale}".')
    if any(len(part) == 1 for part in parts):
        raise ParseError(
            f'Extension and private-use subtags are not supported: "{locale}".'
        )

    language = parts[0].lower()
    script, region, variants = _split_subtags(parts[1:])
    return ParsedTag(language=language, script=script, region=region, variants=variants)


def _split_subtags(parts: list[str]) -> tuple[str | None, str | None, tuple[str, ...]]:
    script: str | None = None
    region: str | None = None
    index = 0

    if index < len(parts) and is_script(parts[index]):
        script = parts[index].capitalize()
        index += 1

    if index < len(parts) and is_region(parts[index]):
        region = parts[index].upper()
        index += 1

    variants = tuple(part.lower() for part in parts[index:])
    return script, region, variants


def normalize_tags(
    tags: Iterable[str], registry: SubtagRegistry | None = None
) -> list[str]:
    """Normalize every tag of a candidate list, keeping order."""
    return [normalize(tag, registry) for tag in tags]


def find_known_tag(normalized: str, known_tags: Iterable[str]) -> str | None:
    """Find ``normalized`` in ``known_tags``, exactly first, then ignoring case."""
    known_tags = list(known_tags)
    if normalized in known_tags:
        return normalized

    lowered = normalized.lower()
    for known_tag in known_tags:
        if known_tag.lower() == lowered:
            return known_tag
    return None


def find_language_only_match(language: str, known_tags: Iterable[str]) -> str | None:
    """Return the first known tag whose language subtag is ``language``, ignoring case."""
    prefix = language.lower() + TAG_SEPARATOR
    for known_tag in known_tags:
        if known_tag.lower().startswith(prefix):
            return known_tag
    return None
