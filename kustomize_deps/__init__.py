"""Extract remote bases and container image pins from kustomization files.

The library reads the text of a kustomize `Kustomization` manifest and returns
the external dependencies it references, in a shape that can be handed to a
dependency update engine:

```python
from kustomize_deps import extract

package_file = extract.extract_package_file(content)
if package_file:
    for dep in package_file.deps:
        print(f"Found {dep.datasource} dependency {dep.dep_name}")
```
"""

__all__ = [
    "base",
    "config",
    "dependency",
    "exceptions",
    "extract",
    "image",
    "manifest",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
