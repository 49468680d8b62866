"""Library for decomposing remote kustomize base references.

Remote bases follow the hashicorp go-getter URL format, see
https://github.com/hashicorp/go-getter#url-format. A base is only a
dependency when it is pinned with a `?ref=` query, for example:

  github.com/kubernetes-sigs/kustomize//examples/multibases?ref=v1.0.6
  git::https://gitlab.com/group/repo.git//deploy?ref=main
  git@github.com:owner/repo.git?ref=v2.0.0

The reference is decomposed one field at a time, each step consuming a fixed
delimiter from the front or back of what remains, so parsing is linear in
the length of the input:

  [git::][scheme://][auth@][host(:|/)]owner/repo[subdir]?ref=value
"""

from dataclasses import dataclass
import logging
import re

from .dependency import Datasource, PackageDependency

__all__ = [
    "parse_git_url",
    "extract_base",
    "GitUrl",
]

_LOGGER = logging.getLogger(__name__)

GIT_FORCE_PREFIX = "git::"
REF_QUERY = "ref="
GIT_SUFFIX = ".git"
GITHUB_HOST = "github.com"

_SCHEME = re.compile(r"^(?:http|https|ssh)://")


@dataclass(frozen=True)
class GitUrl:
    """The named fields of a pinned remote base reference."""

    scheme: str
    """The scheme including `://`, or empty."""

    auth: str
    """The authentication prefix including `@`, or empty."""

    host: str
    """The host including its trailing `:` or `/` separator, or empty."""

    project: str
    """The `owner/repo` pair identifying the repository."""

    subdir: str
    """The path within the repository, or empty."""

    ref: str
    """The pinned git ref."""

    @property
    def path(self) -> str:
        """The host and project of the repository."""
        return f"{self.host}{self.project}"

    @property
    def url(self) -> str:
        """The repository URL without the go-getter prefix or subdirectory."""
        return f"{self.scheme}{self.auth}{self.path}"


def _strip_git_suffix(value: str) -> str:
    return value.removesuffix(GIT_SUFFIX)


def _split_auth(value: str) -> tuple[str, str]:
    """Split an `auth@` prefix, which must appear before the first `/`."""
    authority = value.partition("/")[0]
    if "@" not in authority:
        return "", value
    auth, _, _ = authority.rpartition("@")
    auth = f"{auth}@"
    return auth, value[len(auth) :]


def _split_project(value: str) -> tuple[str, str] | None:
    """Split the leading `owner/repo` from the subdirectory that follows it."""
    owner, sep, rest = value.partition("/")
    if not owner or not sep:
        return None
    repo, sep, subdir = rest.partition("/")
    if not repo:
        return None
    return f"{owner}/{repo}", f"{sep}{subdir}"


def _split_host(value: str) -> tuple[str, str, str] | None:
    """Split the optional host from the project and subdirectory."""
    end = next((idx for idx, char in enumerate(value) if char in ":/"), -1)
    if end > 0 and (parts := _split_project(value[end + 1 :])):
        return (value[: end + 1], *parts)
    if parts := _split_project(value):
        return ("", *parts)
    return None


def parse_git_url(base: str) -> GitUrl | None:
    """Decompose a remote base reference into its fields.

    Returns None if the base is not a remote reference pinned with `?ref=`,
    for example a local directory or file.
    """
    remaining = base.removeprefix(GIT_FORCE_PREFIX)

    remaining, sep, query = remaining.partition("?")
    if not sep or not query.startswith(REF_QUERY):
        return None
    if not (ref := query[len(REF_QUERY) :]):
        return None

    scheme = ""
    if match := _SCHEME.match(remaining):
        scheme = match.group(0)
        remaining = remaining[len(scheme) :]

    auth, remaining = _split_auth(remaining)
    if not (parts := _split_host(remaining)):
        return None
    host, project, subdir = parts
    return GitUrl(
        scheme=scheme,
        auth=auth,
        host=host,
        project=project,
        subdir=subdir,
        ref=ref,
    )


def extract_base(base: str) -> PackageDependency | None:
    """Return the dependency for a remote base, or None if it is not one."""
    if not (git_url := parse_git_url(base)):
        _LOGGER.debug("Skipping base that is not a pinned remote: %s", base)
        return None

    if git_url.path.startswith(GITHUB_HOST):
        return PackageDependency(
            datasource=Datasource.GITHUB_TAGS,
            dep_name=_strip_git_suffix(git_url.project),
            current_value=git_url.ref,
        )

    return PackageDependency(
        datasource=Datasource.GIT_TAGS,
        dep_name=_strip_git_suffix(git_url.path),
        dep_name_short=_strip_git_suffix(git_url.project),
        lookup_name=git_url.url,
        current_value=git_url.ref,
    )
