"""Data models shared by the selection and matrix stages."""

import functools
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import MissingRangeError

VERSION_PLACEHOLDER = "{version}"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a registry timestamp into an aware datetime.

    Accepts ISO-8601 strings with a trailing 'Z', an explicit offset or no
    time part at all. Naive values are taken as UTC.

    Returns:
        datetime or None if the value is missing or unparseable
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def split_range(range_text: str) -> Tuple[str, ...]:
    """Split a pipe-delimited range into trimmed, non-empty segments."""
    if not range_text:
        return ()
    return tuple(part.strip() for part in range_text.split("|") if part.strip())


@dataclass(frozen=True)
class Tag:
    """One published tag of the base image."""
    name: str
    last_updated: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Tag":
        """Create a tag from a Docker Hub result entry."""
        return cls(
            name=data["name"],
            last_updated=parse_timestamp(data.get("last_updated")),
        )


def _compare_by_last_updated(a: Tag, b: Tag) -> int:
    # Tags without a timestamp compare equal so the sort keeps source order
    if a.last_updated is None or b.last_updated is None:
        return 0
    if a.last_updated > b.last_updated:
        return -1
    if a.last_updated < b.last_updated:
        return 1
    return 0


def sort_by_last_updated(tags: List[Tag]) -> List[Tag]:
    """Sort tags most recently updated first (stable)."""
    return sorted(tags, key=functools.cmp_to_key(_compare_by_last_updated))


def get_latest_tag(tags: List[Tag]) -> Optional[Tag]:
    """Get the most recently updated tag, or None for an empty list."""
    if not tags:
        return None
    return sort_by_last_updated(tags)[0]


class StrategyKind(Enum):
    """Version selection strategies."""
    LATEST = "latest"
    ALL = "all"
    SEMVER = "semver"


@dataclass(frozen=True)
class Strategy:
    """Selection strategy with its parameters.

    ``ranges`` is only populated for SEMVER; each entry is one alternative
    of a logical OR.
    """
    kind: StrategyKind
    ranges: Tuple[str, ...] = ()
    max_versions: Optional[int] = None

    @classmethod
    def latest(cls) -> "Strategy":
        return cls(kind=StrategyKind.LATEST)

    @classmethod
    def all(cls, max_versions: Optional[int] = None) -> "Strategy":
        return cls(kind=StrategyKind.ALL, max_versions=max_versions)

    @classmethod
    def semver_range(cls, range_text: Optional[str], max_versions: Optional[int] = None) -> "Strategy":
        """Build a SEMVER strategy from a (possibly pipe-delimited) range."""
        ranges = split_range(range_text or "")
        if not ranges:
            raise MissingRangeError()
        return cls(kind=StrategyKind.SEMVER, ranges=ranges, max_versions=max_versions)

    @property
    def range_expression(self) -> str:
        """The ranges joined into a single OR expression."""
        return " || ".join(self.ranges)


@dataclass
class BuildConfig:
    """A named recipe for one image variant."""
    name: str = "default"
    dockerfile_path: str = "Dockerfile"
    context_path: str = "."
    build_args: Dict[str, str] = field(default_factory=dict)
    tags: List[str] = field(default_factory=lambda: [VERSION_PLACEHOLDER])


@dataclass
class MatrixEntry:
    """One build job: a version combined with a build configuration."""
    version: str
    name: str
    dockerfile_path: str
    context_path: str
    build_args: Dict[str, str]
    tags: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "name": self.name,
            "dockerfilePath": self.dockerfile_path,
            "contextPath": self.context_path,
            "buildArgs": dict(self.build_args),
            "tags": list(self.tags),
        }


@dataclass
class VersionerConfig:
    """Fully normalized configuration for one run."""
    strategy: Strategy
    builds: List[BuildConfig] = field(default_factory=list)


@dataclass
class MatrixResult:
    """Result of a matrix generation run."""
    base_image: str
    versions: List[str] = field(default_factory=list)
    entries: List[MatrixEntry] = field(default_factory=list)
    fallback: bool = False

    def to_output(self) -> Dict[str, List[Dict[str, Any]]]:
        """The matrix in the shape a CI ``strategy.matrix`` expects."""
        return {"include": [entry.to_dict() for entry in self.entries]}

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_output(), indent=indent)
