"""Pick the best canonical tag for a validated language tag."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import NoCanonicalMatchError, ParseError, RegistryValidationError
from .models import LanguageTag, ParsedTag
from .parser import parse_tag
from .registry import SubtagRegistry, load_registry

logger = logging.getLogger(__name__)

# language > region > script: a script match never outweighs a region match.
LANGUAGE_MATCH_SCORE = 100
REGION_MATCH_SCORE = 10
SCRIPT_MATCH_SCORE = 1


def score_candidate(subject: ParsedTag, candidate: ParsedTag) -> int:
    """Score ``candidate`` against ``subject``; 0 means the languages differ."""
    if candidate.language != subject.language:
        return 0
    score = LANGUAGE_MATCH_SCORE
    if subject.region is not None and subject.region == candidate.region:
        score += REGION_MATCH_SCORE
    if subject.script is not None and subject.script == candidate.script:
        score += SCRIPT_MATCH_SCORE
    return score


def resolve_canonical(
    subject: LanguageTag,
    candidates: Sequence[str],
    registry: SubtagRegistry | None = None,
) -> LanguageTag:
    """Return the candidate that best matches ``subject``.

    Candidates that fail to parse or validate are skipped. On equal scores the
    earliest candidate wins.

    Raises:
        NoCanonicalMatchError: If no valid candidate shares the subject's
            language. Skipped candidates are listed on the error.
    """
    if registry is None:
        registry = load_registry()

    best: LanguageTag | None = None
    best_score = 0
    rejected: list[str] = []

    for candidate in candidates:
        try:
            tag = LanguageTag.from_parsed_tag(parse_tag(candidate, registry), registry)
        except (ParseError, RegistryValidationError) as e:
            logger.debug("Skipping canonical candidate %r: %s", candidate, e)
            rejected.append(candidate)
            continue

        score = score_candidate(subject, tag)
        if score > best_score:
            best, best_score = tag, score

    if best is None:
        raise NoCanonicalMatchError(str(subject), candidates, rejected)

    logger.debug("Resolved %s to canonical %s (score %d)", subject, best, best_score)
    return best
