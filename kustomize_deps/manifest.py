"""Representation of the contents of a kustomization file.

Only the parts of a `Kustomization` that refer to external dependencies are
kept: the remote bases (from both the legacy `bases` list and `resources`)
and the `images` overrides.
"""

from dataclasses import dataclass, field
import logging
from typing import Any, Optional

from mashumaro import DataClassDictMixin, field_options
from mashumaro.config import BaseConfig
import yaml

__all__ = [
    "parse_kustomize",
    "KustomizeManifest",
    "ImageReference",
]

_LOGGER = logging.getLogger(__name__)


KUSTOMIZE_KIND = "Kustomization"

_STRING_SCALAR_TAGS = (
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:timestamp",
)


class _ManifestLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain numeric, boolean and date scalars as strings.

    Image tags such as `newTag: 1.10`, `newTag: on` or `newTag: 2021-01-01`
    must stay the text written in the file.
    """


_ManifestLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers if tag not in _STRING_SCALAR_TAGS
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _optional_str(doc: dict[str, Any], key: str) -> str | None:
    """Return a string field, treating a missing or non-string value as absent."""
    value = doc.get(key)
    if value is None or isinstance(value, str):
        return value
    _LOGGER.debug("Ignoring non-string image field %s: %r", key, value)
    return None


def _list_field(doc: dict[str, Any], key: str) -> list[Any]:
    """Return a list field, treating a missing or non-list value as empty."""
    if not (value := doc.get(key)):
        return []
    if not isinstance(value, list):
        _LOGGER.debug("Ignoring Kustomization field %s that is not a list", key)
        return []
    return value


@dataclass(frozen=True)
class ImageReference(DataClassDictMixin):
    """An entry of the Kustomization `images` list."""

    name: Optional[str] = None
    """The image name to match in the resources."""

    new_name: Optional[str] = field(
        metadata=field_options(alias="newName"), default=None
    )
    """The replacement image name."""

    new_tag: Optional[str] = field(
        metadata=field_options(alias="newTag"), default=None
    )
    """The replacement image tag."""

    digest: Optional[str] = None
    """The replacement image digest."""

    @classmethod
    def parse_doc(cls, doc: dict[str, Any]) -> "ImageReference":
        """Parse an ImageReference from an `images` entry."""
        return cls(
            name=_optional_str(doc, "name"),
            new_name=_optional_str(doc, "newName"),
            new_tag=_optional_str(doc, "newTag"),
            digest=_optional_str(doc, "digest"),
        )

    class Config(BaseConfig):
        omit_none = True
        serialize_by_alias = True


@dataclass(frozen=True)
class KustomizeManifest(DataClassDictMixin):
    """A normalized kustomize Kustomization."""

    kind: str
    """The kind of the object, always Kustomization."""

    bases: list[str] = field(default_factory=list)
    """The legacy `bases` entries followed by the `resources` entries."""

    images: list[ImageReference] = field(default_factory=list)
    """The image overrides."""

    @classmethod
    def parse_doc(cls, doc: dict[str, Any]) -> "KustomizeManifest":
        """Parse a KustomizeManifest from a decoded Kustomization document."""
        bases: list[str] = []
        for entry in _list_field(doc, "bases") + _list_field(doc, "resources"):
            if not isinstance(entry, str):
                _LOGGER.debug("Ignoring base that is not a string: %r", entry)
                continue
            bases.append(entry)
        images: list[ImageReference] = []
        for entry in _list_field(doc, "images"):
            if not isinstance(entry, dict):
                _LOGGER.debug("Ignoring image that is not a mapping: %r", entry)
                continue
            images.append(ImageReference.parse_doc(entry))
        return cls(kind=doc["kind"], bases=bases, images=images)


def parse_kustomize(content: str) -> KustomizeManifest | None:
    """Parse the text of a kustomization file.

    Returns None when the content is not valid YAML, is empty, or is not a
    Kustomization.
    """
    try:
        doc = yaml.load(content, Loader=_ManifestLoader)
    except (yaml.YAMLError, RecursionError) as err:
        _LOGGER.debug("Unable to parse kustomization file: %s", err)
        return None

    if not doc:
        return None
    if not isinstance(doc, dict) or doc.get("kind") != KUSTOMIZE_KIND:
        return None
    return KustomizeManifest.parse_doc(doc)
