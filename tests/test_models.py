import json

import pytest
from pydantic import ValidationError

from bcp47tag.errors import RegistryValidationError
from bcp47tag.models import LanguageTag, ParsedTag


def test_string_form_excludes_variants() -> None:
    tag = ParsedTag(language="de", region="DE", variants=("1901",))
    assert str(tag) == "de-DE"
    assert tag.with_variants() == "de-DE-1901"


def test_string_form_with_script() -> None:
    tag = ParsedTag(language="zh", script="Hant", region="TW")
    assert str(tag) == "zh-Hant-TW"
    assert tag.with_variants() == "zh-Hant-TW"


def test_to_dict_keeps_absent_components() -> None:
    tag = ParsedTag(language="sl", variants=("rozaj", "biske"))
    assert tag.to_dict() == {
        "language": "sl",
        "script": None,
        "region": None,
        "variants": ["rozaj", "biske"],
    }
    assert json.loads(tag.model_dump_json()) == tag.to_dict()


def test_empty_components_mean_absent() -> None:
    tag = ParsedTag(language="en", script="", region="")
    assert tag.script is None
    assert tag.region is None


def test_language_is_required() -> None:
    with pytest.raises(ValidationError):
        ParsedTag(language="")


def test_parsed_tag_is_frozen() -> None:
    tag = ParsedTag(language="en")
    with pytest.raises(ValidationError):
        tag.language = "fr"


def test_equal_tags_hash_equal() -> None:
    first = ParsedTag(language="en", region="US")
    second = ParsedTag(language="en", region="US")
    assert first == second
    assert len({first, second}) == 1


def test_language_tag_from_parsed_tag(small_registry) -> None:
    parsed = ParsedTag(language="zh", script="Hans", region="419")
    tag = LanguageTag.from_parsed_tag(parsed, small_registry)
    assert isinstance(tag, LanguageTag)
    assert str(tag) == "zh-Hans-419"


def test_language_tag_rejects_unregistered_subtags(small_registry) -> None:
    with pytest.raises(RegistryValidationError):
        LanguageTag.from_parsed_tag(ParsedTag(language="fr"), small_registry)


def test_language_tag_uses_registry_from_context(small_registry) -> None:
    data = {"language": "en", "region": "QN"}
    tag = LanguageTag.model_validate(data, context={"registry": small_registry})
    assert tag.region == "QN"


def test_language_tag_defaults_to_shared_registry() -> None:
    assert str(LanguageTag(language="en", region="GB")) == "en-GB"
    with pytest.raises(RegistryValidationError):
        LanguageTag(language="en", region="ZY")


def test_language_tag_accepts_grandfathered(small_registry) -> None:
    tag = LanguageTag.from_parsed_tag(ParsedTag(language="i-klingon"), small_registry)
    assert str(tag) == "i-klingon"
