"""Pipeline - sequences tag discovery, selection and matrix expansion."""

import logging

from .exceptions import EmptyTagListError, NoSelectionError
from .matrix_builder import build_matrix
from .models import MatrixResult, VersionerConfig, get_latest_tag
from .tag_classification import filter_semver_tags
from .version_selection import select_versions

logger = logging.getLogger(__name__)


def generate_matrix(base_image: str, config: VersionerConfig, client) -> MatrixResult:
    """
    Generate the build matrix for a base image.

    When no tag looks like a semantic version, the most recently updated
    tag is used instead and the strategy is ignored.

    Args:
        base_image: Image identifier, e.g. 'verdaccio/verdaccio'
        config: Normalized configuration
        client: Tag source with a fetch_tags(image) method

    Returns:
        MatrixResult with the selected versions and matrix entries

    Raises:
        FetchError: If the tags cannot be fetched
        EmptyTagListError: If the image has no tags
        NoSelectionError: If the strategy selects nothing
    """
    all_tags = client.fetch_tags(base_image)
    if not all_tags:
        raise EmptyTagListError(base_image)

    semver_tags = filter_semver_tags(all_tags)
    logger.info(f"{len(semver_tags)} of {len(all_tags)} tags look like semantic versions")

    if not semver_tags:
        logger.warning("No semantic version tags found. Falling back to latest tag.")
        latest = get_latest_tag(all_tags)
        versions = [latest.name]
        return MatrixResult(
            base_image=base_image,
            versions=versions,
            entries=build_matrix(versions, config.builds, base_image),
            fallback=True,
        )

    versions = select_versions(semver_tags, config.strategy)
    if not versions:
        raise NoSelectionError()

    entries = build_matrix(versions, config.builds, base_image)
    logger.info(f"Generated matrix with {len(entries)} configuration(s)")

    return MatrixResult(base_image=base_image, versions=versions, entries=entries)
