"""
Status classification rules.

Threshold ladders are ordered (predicate, label) pairs evaluated top-down;
the first predicate that holds wins, otherwise the ladder's fallback label
applies. Ladders are built from EngineConfig so thresholds stay configurable.

Response time is classified on raw minutes. Classifying on the sigmoid
factor instead (with an extra IMPROVE band) was an earlier revision and is
intentionally not supported.
"""

from typing import Callable, Sequence, Tuple, TypeVar

from sales_diagnostic.config import EngineConfig
from sales_diagnostic.models import FollowUpStatus, ResponseStatus

S = TypeVar("S")

Ladder = Sequence[Tuple[Callable[[float], bool], S]]


def classify(value: float, ladder: Ladder, fallback: S) -> S:
    """Return the label of the first rung whose predicate accepts value."""
    for predicate, label in ladder:
        if predicate(value):
            return label
    return fallback


# =============================================================================
# Follow-Up
# =============================================================================


def follow_up_ladder(config: EngineConfig) -> list[Tuple[Callable[[float], bool], FollowUpStatus]]:
    """
    Ladder over the follow-up loss factor.

    Both boundaries are closed on the WARNING side: exactly
    follow_up_critical_above and exactly follow_up_warning_from are WARNING.
    """
    return [
        (lambda factor: factor > config.follow_up_critical_above, FollowUpStatus.CRITICAL),
        (lambda factor: factor >= config.follow_up_warning_from, FollowUpStatus.WARNING),
    ]


def classify_follow_up(factor: float, config: EngineConfig) -> FollowUpStatus:
    return classify(factor, follow_up_ladder(config), FollowUpStatus.ADEQUATE)


# =============================================================================
# Response Time
# =============================================================================


def response_ladder(config: EngineConfig) -> list[Tuple[Callable[[float], bool], ResponseStatus]]:
    """Ladder over raw response minutes (upper bounds inclusive)."""
    return [
        (lambda minutes: minutes <= config.response_excellent_max_minutes, ResponseStatus.EXCELLENT),
        (lambda minutes: minutes <= config.response_good_max_minutes, ResponseStatus.GOOD),
        (lambda minutes: minutes <= config.response_warning_max_minutes, ResponseStatus.WARNING),
    ]


def classify_response(minutes: float, config: EngineConfig) -> ResponseStatus:
    # NaN fails every rung and lands on CRITICAL
    return classify(minutes, response_ladder(config), ResponseStatus.CRITICAL)
