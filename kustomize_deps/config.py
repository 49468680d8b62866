"""Configuration objects for kustomize-deps."""

from dataclasses import dataclass, field
import re

# Files managed by kustomize, matched against the path relative to the
# directory being scanned.
DEFAULT_FILE_MATCH = [r"(^|/)kustomization\.ya?ml$"]


@dataclass
class ExtractConfig:
    """Configuration for finding and extracting kustomization files."""

    file_match: list[str] = field(default_factory=lambda: list(DEFAULT_FILE_MATCH))
    """Regular expressions selecting the files to extract from."""

    replace_string: bool = True
    """Include the replaceString snapshot in structured output."""

    def matches(self, relative_path: str) -> bool:
        """Return True if the relative POSIX path is a file to extract from."""
        return any(re.search(pattern, relative_path) for pattern in self.file_match)
