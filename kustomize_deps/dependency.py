"""Representation of the dependencies extracted from a kustomization file.

These objects are the hand-off to a dependency update engine. They serialize
with the camelCase field names used on the wire and leave out any field that
is not set:

```python
>>> PackageDependency(
...     datasource=Datasource.GITHUB_TAGS, dep_name="foo/bar", current_value="v1.2.3"
... ).to_dict()
{'datasource': 'github-tags', 'depName': 'foo/bar', 'currentValue': 'v1.2.3'}
```
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

from mashumaro import DataClassDictMixin, field_options
from mashumaro.config import BaseConfig

__all__ = [
    "Datasource",
    "Versioning",
    "PackageDependency",
    "PackageFile",
]


class Datasource(StrEnum):
    """The system used to look up available versions of a dependency."""

    DOCKER = "docker"
    GIT_TAGS = "git-tags"
    GITHUB_TAGS = "github-tags"


class Versioning(StrEnum):
    """The scheme used to order versions of a dependency."""

    DOCKER = "docker"


@dataclass(frozen=True)
class PackageDependency(DataClassDictMixin):
    """A single external dependency referenced by a kustomization file."""

    datasource: Datasource
    """The datasource used to look up new versions."""

    dep_name: str = field(metadata=field_options(alias="depName"))
    """The name of the dependency, e.g. an image name or a repository path."""

    versioning: Optional[Versioning] = None
    """The versioning scheme, when it differs from the datasource default."""

    dep_name_short: Optional[str] = field(
        metadata=field_options(alias="depNameShort"), default=None
    )
    """A short display name for the dependency."""

    lookup_name: Optional[str] = field(
        metadata=field_options(alias="lookupName"), default=None
    )
    """The name to use when looking up versions, if not the dep_name."""

    current_value: Optional[str] = field(
        metadata=field_options(alias="currentValue"), default=None
    )
    """The currently pinned version, tag or git ref."""

    current_digest: Optional[str] = field(
        metadata=field_options(alias="currentDigest"), default=None
    )
    """The currently pinned content digest."""

    replace_string: Optional[str] = field(
        metadata=field_options(alias="replaceString"), default=None
    )
    """Source text used to locate the dependency when applying an update."""

    class Config(BaseConfig):
        omit_none = True
        serialize_by_alias = True


@dataclass(frozen=True)
class PackageFile(DataClassDictMixin):
    """The dependencies extracted from one kustomization file."""

    deps: list[PackageDependency]
    """Remote bases first, then images, each in file order."""

    class Config(BaseConfig):
        omit_none = True
        serialize_by_alias = True
