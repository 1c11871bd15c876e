"""Nearest-flag suggestions for unrecognized tokens."""

from collections.abc import Iterable

from loguru import logger

from argspy.errors import UnknownFlagError
from argspy.matching.edit_distance import similarity
from argspy.utils.constants import Constants
from argspy.utils.helpers import strip_dashes


def suggest(
    token: str,
    candidates: Iterable[str],
    threshold: float = Constants.DEFAULT_SUGGESTION_THRESHOLD,
) -> str | None:
    """Find the known flag closest to an unrecognized token.

    Leading dashes are ignored on both sides, so ``-s`` can suggest
    ``--save``. The first candidate wins ties.

    Args:
        token: The unrecognized token
        candidates: Known flags, in the order they should win ties
        threshold: Minimum similarity a suggestion must reach

    Returns:
        The best candidate as registered, or None if nothing is close enough
    """
    stripped_token = strip_dashes(token)
    best_candidate = None
    best_score = -1.0
    for candidate in candidates:
        score = similarity(stripped_token, strip_dashes(candidate))
        if score > best_score:
            best_candidate, best_score = candidate, score

    if best_candidate is None or best_score < threshold:
        logger.debug(f"No suggestion for {token!r} (best score {best_score:.2f})")
        return None
    logger.debug(f"Suggesting {best_candidate!r} for {token!r} (score {best_score:.2f})")
    return best_candidate


def unknown_flag_error(
    token: str,
    position: int,
    known_names: Iterable[str],
    threshold: float = Constants.DEFAULT_SUGGESTION_THRESHOLD,
) -> UnknownFlagError:
    """Build the error for an unknown token, including a suggestion.

    Help flags are always offered as candidates after the registered names.
    A token in first position that does not start with a dash gets an extra
    hint that a flag or command was expected there.
    """
    candidates = [*known_names, *Constants.HELP_FLAGS]
    suggestion = suggest(token, candidates, threshold)
    first_position = position == 0 and not token.startswith("-")
    return UnknownFlagError(token, suggestion, first_position)
