"""Helper functions for working with kustomize image overrides.

An `images` entry pins a container image either by tag, by digest, or by
digest with a tag kept for display. The pin is classified into exactly one
of the variants below before a dependency is produced.
"""

from dataclasses import dataclass
import logging

from .dependency import Datasource, PackageDependency, Versioning
from .manifest import ImageReference

__all__ = [
    "classify_pin",
    "extract_image",
    "TagPin",
    "DigestPin",
    "DigestPinWithDisplayTag",
    "ImagePin",
]

_LOGGER = logging.getLogger(__name__)

DIGEST_PREFIX = "sha256:"


@dataclass(frozen=True)
class TagPin:
    """An image pinned by tag only."""

    tag: str


@dataclass(frozen=True)
class DigestPin:
    """An image pinned by a digest given in the `newTag` field."""

    digest: str


@dataclass(frozen=True)
class DigestPinWithDisplayTag:
    """An image pinned by the `digest` field, with an optional tag."""

    digest: str
    tag: str | None


ImagePin = TagPin | DigestPin | DigestPinWithDisplayTag


def classify_pin(image: ImageReference) -> ImagePin | None:
    """Return how the image is pinned, or None if it is not pinned."""
    if image.digest:
        return DigestPinWithDisplayTag(digest=image.digest, tag=image.new_tag)
    if not image.new_tag:
        return None
    if image.new_tag.startswith(DIGEST_PREFIX):
        return DigestPin(digest=image.new_tag)
    return TagPin(tag=image.new_tag)


def extract_image(image: ImageReference) -> PackageDependency | None:
    """Return the dependency for an image override, or None if not pinned."""
    if not image.name or not (pin := classify_pin(image)):
        _LOGGER.debug("Skipping image without name, tag or digest: %s", image)
        return None

    current_value: str | None = None
    current_digest: str | None = None
    if isinstance(pin, DigestPinWithDisplayTag):
        current_digest = pin.digest
        current_value = pin.tag
    elif isinstance(pin, DigestPin):
        current_digest = pin.digest
    else:
        current_value = pin.tag

    return PackageDependency(
        datasource=Datasource.DOCKER,
        versioning=Versioning.DOCKER,
        dep_name=image.new_name if image.new_name is not None else image.name,
        current_value=current_value,
        current_digest=current_digest,
    )
