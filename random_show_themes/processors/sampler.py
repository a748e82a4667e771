"""Random sampling of distinct shows and their theme songs."""

import logging
import random
from typing import Mapping, Optional, Sequence

from ..models.draw import SamplingReport, ThemeDraw
from ..models.show import Show
from ..outputs.sinks import OutputError, ResultSink
from ..utils.themes import aggregate_themes, classify_theme

logger = logging.getLogger(__name__)


def resolve_target_count(requested: int, candidates: Sequence[int], hard_fail: bool) -> Optional[int]:
    """
    Cap the requested number of results at the number of distinct candidates.

    Args:
        requested: Number of results asked for
        candidates: The candidate show ids
        hard_fail: Abort instead of lowering the count

    Returns:
        The number of results to sample, or None if the run should abort
    """
    available = len(set(candidates))
    if requested <= available:
        return requested

    logger.warning(
        "%d results were requested, however the list only contained %d distinct entries",
        requested,
        available,
    )
    if hard_fail:
        return None
    logger.info("Requesting %d results instead", available)
    return available


def _draw_one(
    pool: list[int],
    catalog: Mapping[int, Show],
    rng: random.Random,
    report: SamplingReport,
) -> Optional[ThemeDraw]:
    """Draw unvisited shows until one yields a theme, or None once the pool runs dry."""
    while pool:
        value = rng.choice(pool)
        report.visited.add(value)
        # Every copy of the value counts as visited
        pool[:] = [candidate for candidate in pool if candidate != value]

        show = catalog.get(value)
        if show is None:
            logger.warning("Show %d from the list is not in the catalog, skipping", value)
            report.missing.append(value)
            continue

        if not show.has_themes:
            logger.debug("Show %d (%s) has no themes, trying another show", value, show.title)
            report.themeless.append(value)
            continue

        themes = aggregate_themes(show)

        theme = rng.choice(themes)
        return ThemeDraw(theme=theme, category=classify_theme(theme, show), show=show)

    return None


def sample_themes(
    target_count: int,
    candidates: Sequence[int],
    catalog: Mapping[int, Show],
    rng: random.Random,
    sink: ResultSink,
) -> SamplingReport:
    """
    Pick up to `target_count` themes from distinct shows and emit them to `sink`.

    Each draw is uniform over the candidate positions whose value has not
    been visited yet, so duplicated ids are proportionally more likely.
    Ids missing from the catalog and shows without themes are skipped
    without using up a result. Sampling stops early once every distinct
    candidate has been visited.

    A failing sink only fails the current result; the remaining results
    are still attempted.

    Args:
        target_count: Number of results to produce
        candidates: Non-empty list of candidate show ids
        catalog: Non-empty mapping of show id to Show
        rng: Random source used for every draw
        sink: Receives each result as it is drawn

    Returns:
        SamplingReport with success and failure counts
    """
    report = SamplingReport(requested=target_count)
    pool = list(candidates)

    for _ in range(target_count):
        draw = _draw_one(pool, catalog, rng, report)
        if draw is None:
            logger.error("Not enough results were found")
            report.failures += 1
            report.exhausted = True
            break

        logger.debug("Picked %r [%s] from show %d", draw.theme, draw.category.value, draw.show.id)
        try:
            sink.emit(draw)
        except OutputError as exc:
            logger.error("%s", exc)
            report.failures += 1
            continue
        report.successes += 1

    return report
