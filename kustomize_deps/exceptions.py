"""Exceptions related to kustomize-deps.

Extraction itself never raises: malformed manifests and references are
reported by returning `None`. These exceptions are raised by the tool layer
when reading inputs from disk.
"""

__all__ = [
    "KustomizeDepsException",
    "InputException",
]


class KustomizeDepsException(Exception):
    """Generic base exception used for this library."""


class InputException(KustomizeDepsException):
    """Raised when the input paths or files can't be read as expected."""
