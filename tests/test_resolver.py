import pytest

from bcp47tag.errors import NoCanonicalMatchError
from bcp47tag.models import LanguageTag, ParsedTag
from bcp47tag.parser import parse_tag
from bcp47tag.resolver import resolve_canonical, score_candidate

CANDIDATES = ["en-US", "en-GB", "fr-FR"]


def language_tag(locale: str) -> LanguageTag:
    return LanguageTag.from_parsed_tag(parse_tag(locale))


def test_language_only_picks_first_candidate() -> None:
    assert str(resolve_canonical(language_tag("en"), CANDIDATES)) == "en-US"


def test_region_match_wins() -> None:
    assert str(resolve_canonical(language_tag("en-GB"), CANDIDATES)) == "en-GB"


def test_other_language() -> None:
    assert str(resolve_canonical(language_tag("fr"), CANDIDATES)) == "fr-FR"


def test_script_match_breaks_ties_in_order() -> None:
    subject = language_tag("zh-Hant")
    candidates = ["zh-Hans-CN", "zh-Hant-TW", "zh-Hant"]
    assert str(resolve_canonical(subject, candidates)) == "zh-Hant-TW"


def test_region_outweighs_script() -> None:
    subject = language_tag("zh-Hant-TW")
    candidates = ["zh-Hant-CN", "zh-Hans-TW"]
    assert str(resolve_canonical(subject, candidates)) == "zh-Hans-TW"


def test_candidates_are_normalized() -> None:
    assert str(resolve_canonical(language_tag("en-gb"), ["en_us", "EN_gb"])) == "en-GB"


def test_invalid_candidates_are_skipped() -> None:
    subject = language_tag("en")
    assert str(resolve_canonical(subject, ["en-ZY", "", "en-x-private", "en-GB"])) == "en-GB"


def test_no_match() -> None:
    with pytest.raises(NoCanonicalMatchError) as excinfo:
        resolve_canonical(language_tag("de"), ["en-ZY", "fr-FR"])
    error = excinfo.value
    assert error.subject == "de"
    assert error.candidates == ("en-ZY", "fr-FR")
    assert error.rejected == ("en-ZY",)
    assert "en-ZY" in str(error)


def test_grandfathered_only_candidates_do_not_match() -> None:
    with pytest.raises(NoCanonicalMatchError):
        resolve_canonical(language_tag("en"), ["i-klingon"])


def test_grandfathered_subject() -> None:
    result = resolve_canonical(language_tag("i-klingon"), ["tlh", "I_KLINGON"])
    assert str(result) == "i-klingon"


def test_empty_candidate_list() -> None:
    with pytest.raises(NoCanonicalMatchError):
        resolve_canonical(language_tag("en"), [])


def test_resolution_is_deterministic() -> None:
    subject = language_tag("en")
    results = {str(resolve_canonical(subject, CANDIDATES)) for _ in range(10)}
    assert results == {"en-US"}


def test_uses_given_registry(small_registry) -> None:
    subject = LanguageTag.from_parsed_tag(ParsedTag(language="en"), small_registry)
    result = resolve_canonical(subject, ["en-FR", "en-QM"], small_registry)
    assert str(result) == "en-QM"


@pytest.mark.parametrize(
    ("subject", "candidate", "score"),
    [
        ("en", "fr", 0),
        ("en", "en-US", 100),
        ("en-US", "en-US", 110),
        ("zh-Hant", "zh-Hant-TW", 101),
        ("zh-Hant-TW", "zh-Hant-TW", 111),
        ("zh-Hant-TW", "zh-Hans-CN", 100),
    ],
)
def test_score_candidate(subject: str, candidate: str, score: int) -> None:
    assert score_candidate(parse_tag(subject), parse_tag(candidate)) == score
