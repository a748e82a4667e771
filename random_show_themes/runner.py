"""Run entry point: load inputs, sample themes, write results."""

import logging
import sys
from typing import Optional, TextIO

from .config import RunConfig
from .outputs.sinks import OutputError, create_sink
from .processors.sampler import resolve_target_count, sample_themes
from .utils.loaders import LoadError, load_candidates, load_catalog
from .utils.random_source import get_random

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def run(config: RunConfig, stream: Optional[TextIO] = None) -> int:
    """
    Execute one run and return the process exit code.

    Load errors, an empty catalog or list, and a sink that cannot even
    write its header always end the run with exit code 1. Every other
    failure only does so when `config.hard_fail` is set; results already
    written stay written.

    Args:
        config: Resolved run configuration
        stream: Where results go (defaults to stdout)

    Returns:
        0 on success or soft failure, 1 otherwise
    """
    stream = stream or sys.stdout

    try:
        catalog = load_catalog(config.catalog_path)
        candidates = load_candidates(config.list_path)
    except LoadError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    if not catalog:
        logger.error("The catalog cannot be empty")
        return EXIT_FAILURE
    if not candidates:
        logger.error("The list cannot be empty")
        return EXIT_FAILURE

    target_count = resolve_target_count(config.count, candidates, config.hard_fail)
    if target_count is None:
        return EXIT_FAILURE

    sink = create_sink(config.output_mode, stream, table_width=config.table_width)
    try:
        sink.open()
    except OutputError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    report = sample_themes(target_count, candidates, catalog, get_random(config.seed), sink)

    try:
        sink.close()
    except OutputError as exc:
        logger.error("%s", exc)
        report.failures += 1

    logger.info(
        "Wrote %d of %d results (%d failures, %d shows visited)",
        report.successes,
        report.requested,
        report.failures,
        len(report.visited),
    )

    if report.failed and config.hard_fail:
        return EXIT_FAILURE
    return EXIT_OK
