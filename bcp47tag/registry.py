"""IANA Language Subtag Registry lookups.

The registry is an immutable snapshot of five subtag sets. Instances can be
built explicitly (``from_snapshot``/``from_file``) and passed around, or
obtained through :func:`load_registry`, which materializes the bundled
snapshot once per process.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from pydantic import BaseModel

from .config import ALT_SEPARATOR, TAG_SEPARATOR, registry_path
from .errors import ParseError, RegistryValidationError
from .loaders import expand_entries, load_snapshot
from .models import ParsedTag, RegistrySnapshot

logger = logging.getLogger(__name__)

_registry_lock = threading.Lock()
_registry: SubtagRegistry | None = None


class SubtagRegistry(BaseModel, frozen=True):
    """Valid subtags, stored in their canonical case.

    Languages, variants and grandfathered tags are lowercase, scripts are
    title-case and regions are uppercase. Queries canonicalize their argument
    once before the membership check.
    """

    languages: frozenset[str]
    scripts: frozenset[str]
    regions: frozenset[str]
    variants: frozenset[str]
    grandfathered: frozenset[str]
    file_date: str | None = None

    @classmethod
    def from_snapshot(cls, snapshot: RegistrySnapshot) -> SubtagRegistry:
        return cls(
            languages=expand_entries(snapshot.languages, str.lower),
            scripts=expand_entries(snapshot.scripts, str.capitalize),
            regions=expand_entries(snapshot.regions, str.upper),
            variants=expand_entries(snapshot.variants, str.lower),
            grandfathered=expand_entries(snapshot.grandfathered, str.lower),
            file_date=snapshot.file_date,
        )

    @classmethod
    def from_file(cls, path: Path) -> SubtagRegistry:
        return cls.from_snapshot(load_snapshot(path))

    @classmethod
    def load(cls) -> SubtagRegistry:
        """Return the process-wide registry, loading it on first use."""
        return load_registry()

    def is_valid_language(self, language: str) -> bool:
        return language.lower() in self.languages

    def is_valid_script(self, script: str) -> bool:
        return script.capitalize() in self.scripts

    def is_valid_region(self, region: str) -> bool:
        return region.upper() in self.regions

    def is_valid_variant(self, variant: str) -> bool:
        return variant.lower() in self.variants

    def is_grandfathered(self, tag: str) -> bool:
        return tag.lower() in self.grandfathered

    def grandfathered_form(self, tag: str) -> str | None:
        """Return the stored form of a grandfathered tag, or None if ``tag`` is not one."""
        lowered = tag.lower()
        if lowered in self.grandfathered:
            return lowered
        return None

    def invalid_subtags(
        self,
        tag: ParsedTag,
        *,
        require_region: bool = False,
        require_script: bool = False,
    ) -> list[tuple[str, str | None]]:
        """List every ``(kind, value)`` pair that makes ``tag`` invalid.

        A required component that is missing is reported with a ``None`` value.
        """
        if self.is_grandfathered(str(tag)):
            return []

        invalid: list[tuple[str, str | None]] = []
        if not self.is_valid_language(tag.language):
            invalid.append(("language", tag.language))

        if tag.script is None:
            if require_script:
                invalid.append(("script", None))
        elif not self.is_valid_script(tag.script):
            invalid.append(("script", tag.script))

        if tag.region is None:
            if require_region:
                invalid.append(("region", None))
        elif not self.is_valid_region(tag.region):
            invalid.append(("region", tag.region))

        invalid.extend(
            ("variant", variant)
            for variant in tag.variants
            if not self.is_valid_variant(variant)
        )
        return invalid

    def is_valid_parsed_tag(
        self,
        tag: ParsedTag,
        *,
        require_region: bool = False,
        require_script: bool = False,
    ) -> bool:
        return not self.invalid_subtags(
            tag, require_region=require_region, require_script=require_script
        )

    def validate_parsed_tag(self, tag: ParsedTag) -> None:
        """Raise RegistryValidationError unless every subtag of ``tag`` is registered."""
        invalid = self.invalid_subtags(tag)
        if invalid:
            details = ", ".join(
                f"{kind} '{value}'" if value is not None else f"missing {kind}"
                for kind, value in invalid
            )
            raise RegistryValidationError(
                f'Tag "{tag.with_variants()}" is not registered: {details}.', invalid
            )

    def parse_locale(self, locale: str) -> ParsedTag | None:
        """Parse ``locale`` with this registry, returning None when it is malformed."""
        from .parser import parse_tag

        try:
            return parse_tag(locale, registry=self)
        except ParseError:
            return None

    def is_valid_locale(
        self,
        locale: str,
        *,
        require_region: bool = False,
        require_script: bool = False,
    ) -> bool:
        if self.is_grandfathered(locale.replace(ALT_SEPARATOR, TAG_SEPARATOR)):
            return True
        parsed = self.parse_locale(locale)
        if parsed is None:
            return False
        return self.is_valid_parsed_tag(
            parsed, require_region=require_region, require_script=require_script
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(languages={len(self.languages)}, "
            f"scripts={len(self.scripts)}, regions={len(self.regions)}, "
            f"variants={len(self.variants)}, grandfathered={len(self.grandfathered)})"
        )


def load_registry() -> SubtagRegistry:
    """Return the shared registry, building it from the snapshot on first call.

    Concurrent first calls build it exactly once; a failed load raises
    RegistryLoadError and leaves nothing cached.
    """
    global _registry
    registry = _registry
    if registry is not None:
        return registry
    with _registry_lock:
        if _registry is None:
            path = registry_path()
            _registry = SubtagRegistry.from_file(path)
            logger.info("Loaded subtag registry from %s: %r", path, _registry)
        return _registry


def reset_registry() -> None:
    """Forget the shared registry so the next load re-reads the snapshot."""
    global _registry
    with _registry_lock:
        _registry = None
