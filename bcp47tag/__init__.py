"""BCP 47 language tag normalization, validation and canonical matching."""

from .errors import (
    BCP47Error,
    InvalidArgumentError,
    InvalidFallbackLocaleError,
    InvalidLocaleError,
    InvalidMatchingTagError,
    NoCanonicalMatchError,
    ParseError,
    RegistryLoadError,
    RegistryValidationError,
    TagError,
)
from .models import LanguageTag, ParsedTag
from .normalizer import normalize
from .parser import parse_tag
from .registry import SubtagRegistry, load_registry
from .resolver import resolve_canonical
from .tag import BCP47Tag

__all__ = [
    "BCP47Error",
    "BCP47Tag",
    "InvalidArgumentError",
    "InvalidFallbackLocaleError",
    "InvalidLocaleError",
    "InvalidMatchingTagError",
    "LanguageTag",
    "NoCanonicalMatchError",
    "ParseError",
    "ParsedTag",
    "RegistryLoadError",
    "RegistryValidationError",
    "SubtagRegistry",
    "TagError",
    "load_registry",
    "normalize",
    "parse_tag",
    "resolve_canonical",
]
