"""
Version Selection Module

Pure functions that pick the versions to build from a list of semver-like
tags according to a Strategy.
"""

import logging
from typing import List

from nodesemver import satisfies

from .exceptions import InvalidStrategyError, MissingRangeError
from .models import Strategy, StrategyKind, Tag, sort_by_last_updated
from .tag_classification import normalize_version

logger = logging.getLogger(__name__)


def select_versions(tags: List[Tag], strategy: Strategy) -> List[str]:
    """
    Select the versions to build.

    Args:
        tags: Tags already filtered to semantic version candidates
        strategy: Selection strategy

    Returns:
        Original tag names, in the order the strategy produced them

    Raises:
        InvalidStrategyError: If the strategy kind is not recognized
        MissingRangeError: If a semver strategy carries no range
    """
    kind = strategy.kind

    if kind == StrategyKind.LATEST:
        selected = sort_by_last_updated(tags)[:1]
    elif kind == StrategyKind.ALL:
        selected = list(tags)
    elif kind == StrategyKind.SEMVER:
        if not strategy.ranges:
            raise MissingRangeError()
        selected = filter_by_semver_range(tags, strategy.range_expression)
    else:
        raise InvalidStrategyError(kind)

    logger.info(f"Filtered with strategy: {kind.value}")

    if strategy.max_versions is not None and strategy.max_versions > 0:
        logger.info(f"Limiting to maximum of {strategy.max_versions} versions")
        selected = selected[:strategy.max_versions]

    versions = [tag.name for tag in selected]
    logger.info(f"Filtered to {len(versions)} version(s): {', '.join(versions)}")
    return versions


def filter_by_semver_range(tags: List[Tag], range_expression: str) -> List[Tag]:
    """
    Keep the tags whose normalized version satisfies the range.

    A tag whose range check raises is skipped with a warning instead of
    failing the whole selection.
    """
    logger.info(f"Filtering by semver range: {range_expression}")

    matched = []
    for tag in tags:
        version = normalize_version(tag.name)
        if version is None:
            logger.debug(f"Skipping invalid semver: {tag.name}")
            continue

        try:
            if satisfies(version, range_expression, loose=False):
                matched.append(tag)
        except Exception as e:
            logger.warning(f"Failed to check semver range for {tag.name}: {e}")

    return matched
