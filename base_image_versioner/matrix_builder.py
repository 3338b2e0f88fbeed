"""Matrix builder - expands selected versions against build configurations."""

from typing import Dict, List

from .models import VERSION_PLACEHOLDER, BuildConfig, MatrixEntry


def substitute_version(template: str, version: str) -> str:
    """Replace the first version placeholder in a tag template.

    Only the first occurrence is replaced; '{version}-{version}' becomes
    '1.0.0-{version}'. Existing pipelines rely on this.
    """
    return template.replace(VERSION_PLACEHOLDER, version, 1)


def merge_build_args(version: str, base_image: str, build_args: Dict[str, str]) -> Dict[str, str]:
    """Standard build args overlaid with the build's own (which win)."""
    merged = {
        "BASE_IMAGE_VERSION": version,
        "BASE_IMAGE": base_image,
    }
    merged.update(build_args or {})
    return merged


def build_matrix(versions: List[str], builds: List[BuildConfig], base_image: str) -> List[MatrixEntry]:
    """
    Build one matrix entry per (version, build) pair.

    Entries for the same version are contiguous, in version order.
    """
    matrix = []

    for version in versions:
        for build in builds:
            templates = build.tags or [VERSION_PLACEHOLDER]
            matrix.append(MatrixEntry(
                version=version,
                name=build.name or "default",
                dockerfile_path=build.dockerfile_path or "Dockerfile",
                context_path=build.context_path or ".",
                build_args=merge_build_args(version, base_image, build.build_args),
                tags=[substitute_version(tag, version) for tag in templates],
            ))

    return matrix
