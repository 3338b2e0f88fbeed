"""
Tag Classification Module

Pure functions for detecting version-like tags and normalizing them.
This module contains no side effects - only tag analysis logic.
"""

import re
from enum import Enum
from typing import Iterable, List, Optional

from .models import Tag

# Loose acceptance: bare majors, short forms and suffixed variants
SEMVER_CANDIDATE_RE = re.compile(r"^v?\d+(\.\d+)?(\.\d+)?(-[\w.]+)?$")

COERCE_RE = re.compile(r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])")


class TagType(Enum):
    """Enum for different tag types."""
    SEMVER = "semver"
    OTHER = "other"
    INVALID = "invalid"


def detect_tag_type(tag: str) -> TagType:
    """
    Determine whether a tag looks like a semantic version.

    The part before the first hyphen is tested as well as the whole name,
    so '1.0.0-alpine' and '18-bullseye' are accepted while 'latest',
    'alpine' and 'slim' are not.

    Args:
        tag: The image tag string

    Returns:
        TagType enum value
    """
    if not tag or not tag.strip():
        return TagType.INVALID

    tag = tag.strip()
    prefix = tag.split("-", 1)[0]

    if SEMVER_CANDIDATE_RE.match(prefix) or SEMVER_CANDIDATE_RE.match(tag):
        return TagType.SEMVER

    return TagType.OTHER


def is_semver_candidate(tag: str) -> bool:
    return detect_tag_type(tag) == TagType.SEMVER


def filter_semver_tags(tags: Iterable[Tag]) -> List[Tag]:
    """Keep only tags that look like semantic versions, in source order."""
    return [tag for tag in tags if is_semver_candidate(tag.name)]


def normalize_version(tag: str) -> Optional[str]:
    """
    Normalize a tag name into strict MAJOR.MINOR.PATCH form.

    A leading 'v' is stripped and the name is coerced from its first run
    of numbers, so variant suffixes are dropped and missing components are
    filled with zero ('1.0.0-alpine' -> '1.0.0', '1' -> '1.0.0',
    '1.2' -> '1.2.0', '18-alpine' -> '18.0.0').

    Returns:
        Normalized version string or None if no number can be found
    """
    cleaned = tag.strip()
    if cleaned.startswith("v"):
        cleaned = cleaned[1:]

    match = COERCE_RE.search(cleaned)
    if not match:
        return None

    major, minor, patch = match.groups()
    return f"{int(major)}.{int(minor or 0)}.{int(patch or 0)}"
