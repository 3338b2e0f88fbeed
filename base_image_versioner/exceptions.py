"""Custom exceptions for Base Image Versioner."""


class VersionerError(Exception):
    """Base class for all errors that terminate a run."""


class FetchError(VersionerError):
    """Raised when tags cannot be fetched from the registry."""

    def __init__(self, image: str, cause):
        self.image = image
        self.cause = cause
        super().__init__(f"Failed to fetch Docker tags for {image}: {cause}")


class EmptyTagListError(VersionerError):
    """Raised when the image has no active tags at all."""

    def __init__(self, image: str):
        self.image = image
        super().__init__(f"No tags found for Docker image: {image}")


class ConfigError(VersionerError):
    """Raised when the configuration is invalid."""


class InvalidStrategyError(ConfigError):
    """Raised when the strategy name is not recognized."""

    def __init__(self, strategy):
        self.strategy = strategy
        super().__init__(
            f"Invalid strategy: {strategy}. Must be one of: latest, all, semver"
        )


class MissingRangeError(ConfigError):
    """Raised when the semver strategy has no range to match against."""

    def __init__(self):
        super().__init__('semverRange is required when strategy is "semver"')


class NoSelectionError(VersionerError):
    """Raised when the strategy selects no versions."""

    def __init__(self, message: str = "No versions matched the specified criteria"):
        super().__init__(message)
