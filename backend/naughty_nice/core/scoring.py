"""
Weighted combination of per-source results into one verdict.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from naughty_nice.config import NEUTRAL_SCORE, SCORE_WEIGHTS
from naughty_nice.schemas import AggregateResult, BreakdownEntry, SourceResult, verdict_for
from naughty_nice.utils import clamp_score, round_half_up


def weight_percent(weight: float) -> int:
    return round_half_up(weight * 100)


def aggregate(
    sources: Mapping[str, Optional[SourceResult]],
    weights: Mapping[str, float] = SCORE_WEIGHTS,
) -> AggregateResult:
    """
    Weighted mean of the sources that produced a score.

    Sources that were not found are left out of both the weighted sum and
    the weight total, so the remaining sources keep their relative weights
    instead of being pulled toward a zero. With nothing found the result is
    a neutral 50.

    Args:
        sources: Source name -> result (any subset of the known sources)
        weights: Source name -> weight; unknown sources weigh 0

    Returns:
        AggregateResult with the breakdown of included sources
    """
    weighted_sum = 0.0
    total_weight = 0.0
    breakdown: Dict[str, BreakdownEntry] = {}

    for source, result in sources.items():
        if result is None or not result.found or result.score is None:
            continue

        weight = weights.get(source, 0.0)
        weighted_sum += result.score * weight
        total_weight += weight

        breakdown[source] = BreakdownEntry(
            **result.model_dump(exclude={"verdict"}),
            weight_percent=weight_percent(weight),
        )

    final_score = clamp_score(round_half_up(weighted_sum / total_weight)) if total_weight > 0 else NEUTRAL_SCORE

    return AggregateResult(
        final_score=final_score,
        verdict=verdict_for(final_score),
        breakdown=breakdown,
        sources_found=len(breakdown),
    )
