"""Pydantic models for parsed language tags and the registry snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

if TYPE_CHECKING:
    from .registry import SubtagRegistry


class ParsedTag(BaseModel, frozen=True):
    """Structural decomposition of a BCP-47 tag, not yet checked against the registry.

    ``str()`` renders ``language[-Script][-REGION]`` and leaves variants out;
    use :meth:`with_variants` or :meth:`to_dict` when variants matter.
    """

    language: str = Field(min_length=1)
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    @field_validator("script", "region", mode="before")
    @classmethod
    def empty_as_absent(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @property
    def has_script(self) -> bool:
        return self.script is not None

    @property
    def has_region(self) -> bool:
        return self.region is not None

    @property
    def has_variants(self) -> bool:
        return len(self.variants) > 0

    def with_variants(self) -> str:
        """Render the tag including its variant subtags."""
        return "-".join([str(self), *self.variants])

    def to_dict(self) -> dict[str, Any]:
        """Return the subtags as a plain mapping, keeping ``None`` for absent ones."""
        return {
            "language": self.language,
            "script": self.script,
            "region": self.region,
            "variants": list(self.variants),
        }

    def __str__(self) -> str:
        parts: list[str] = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        return "-".join(parts)

    def __hash__(self) -> int:
        return hash((self.language, self.script, self.region, self.variants))


class LanguageTag(ParsedTag, frozen=True):
    """A ParsedTag whose every subtag is known to the IANA registry.

    Validation runs whenever an instance is built. The registry is taken from
    the validation context (``context={"registry": registry}``) and defaults to
    the process-wide snapshot. Failures raise ``RegistryValidationError``.
    """

    @model_validator(mode="after")
    def check_registry(self, info: ValidationInfo) -> LanguageTag:
        registry = (info.context or {}).get("registry")
        if registry is None:
            from .registry import load_registry

            registry = load_registry()
        registry.validate_parsed_tag(self)
        return self

    @classmethod
    def from_parsed_tag(
        cls, parsed_tag: ParsedTag, registry: SubtagRegistry | None = None
    ) -> LanguageTag:
        """Promote a parsed tag after checking it against ``registry``."""
        return cls.model_validate(
            {
                "language": parsed_tag.language,
                "script": parsed_tag.script,
                "region": parsed_tag.region,
                "variants": parsed_tag.variants,
            },
            context={"registry": registry},
        )


class RegistrySnapshot(BaseModel):
    """Model for the bundled IANA subtag registry snapshot.

    Entries are stored as published; ``start..end`` ranges are allowed and
    expanded when the registry is built.
    """

    file_date: str | None = None
    languages: list[str]
    scripts: list[str]
    regions: list[str]
    variants: list[str]
    grandfathered: list[str]
