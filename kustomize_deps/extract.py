"""Library for extracting the dependencies of a kustomization file.

This is the entry point used by a dependency update engine. It takes the text
of one file and returns a `PackageFile`, or None when the file is not a
Kustomization or references nothing that can be updated:

```python
from kustomize_deps import extract

content = pathlib.Path("kustomization.yaml").read_text()
package_file = extract.extract_package_file(content)
```
"""

import dataclasses
import logging

from .base import extract_base
from .context import trace_context
from .dependency import PackageDependency, PackageFile
from .image import extract_image
from .manifest import parse_kustomize

__all__ = [
    "extract_package_file",
]

_LOGGER = logging.getLogger(__name__)


def extract_package_file(content: str) -> PackageFile | None:
    """Return the remote bases and image pins referenced by the content."""
    with trace_context("extract_package_file"):
        if not (manifest := parse_kustomize(content)):
            return None

        deps: list[PackageDependency] = []

        # Remote bases
        for base in manifest.bases:
            if dep := extract_base(base):
                deps.append(dep)

        # Image tags, located by the whole file when updating
        for image in manifest.images:
            if dep := extract_image(image):
                deps.append(dataclasses.replace(dep, replace_string=content))

        _LOGGER.debug("Found %d dependencies", len(deps))
        if not deps:
            return None
        return PackageFile(deps=deps)
