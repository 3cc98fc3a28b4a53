"""Separator and casing normalization of raw locale strings."""

from __future__ import annotations

from .config import ALT_SEPARATOR, TAG_SEPARATOR
from .registry import SubtagRegistry, load_registry


def normalize(raw: str, registry: SubtagRegistry | None = None) -> str:
    """Rewrite ``raw`` into canonical separators and positional casing.

    Underscores become hyphens and grandfathered tags are returned in their
    registered form. Otherwise casing follows position only:

    * ``en`` -> ``en``
    * ``en_us`` -> ``en-US``
    * ``zH-haNS-cn`` -> ``zh-Hans-CN``

    With three or more parts the second one is always title-cased, even when
    it is really a region or variant (``de-de-1901`` -> ``de-De-1901``); the
    parser decides what each part is and re-cases it accordingly.
    """
    if registry is None:
        registry = load_registry()
    lowered = raw.replace(ALT_SEPARATOR, TAG_SEPARATOR).lower()

    grandfathered = registry.grandfathered_form(lowered)
    if grandfathered is not None:
        return grandfathered

    parts = lowered.split(TAG_SEPARATOR)
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return TAG_SEPARATOR.join([parts[0], parts[1].upper()])
    return TAG_SEPARATOR.join(
        [parts[0], parts[1].capitalize(), parts[2].upper(), *parts[3:]]
    )
