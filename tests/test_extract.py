"""Tests for the extract library."""

import logging
from pathlib import Path

import pytest

from kustomize_deps.dependency import (
    Datasource,
    PackageDependency,
    PackageFile,
    Versioning,
)
from kustomize_deps.extract import extract_package_file

TESTDATA_DIR = Path("tests/testdata/repo")

KUSTOMIZATION = """---
apiVersion: kustomize.config.k8s.io/v1beta1
kind: Kustomization
bases:
- github.com/foo/bar?ref=v1.2.3
resources:
- deployment.yaml
- git::ssh://example.com/group/repo.git//dir?ref=main
images:
- name: nginx
  newTag: "1.19"
- name: busybox
- name: redis
  digest: sha256:cafef00d
  newTag: "7.2"
"""


def test_extract_package_file() -> None:
    """Test bases come before images, each in file order."""

    assert extract_package_file(KUSTOMIZATION) == PackageFile(
        deps=[
            PackageDependency(
                datasource=Datasource.GITHUB_TAGS,
                dep_name="foo/bar",
                current_value="v1.2.3",
            ),
            PackageDependency(
                datasource=Datasource.GIT_TAGS,
                dep_name="example.com/group/repo",
                dep_name_short="group/repo",
                lookup_name="ssh://example.com/group/repo.git",
                current_value="main",
            ),
            PackageDependency(
                datasource=Datasource.DOCKER,
                versioning=Versioning.DOCKER,
                dep_name="nginx",
                current_value="1.19",
                replace_string=KUSTOMIZATION,
            ),
            PackageDependency(
                datasource=Datasource.DOCKER,
                versioning=Versioning.DOCKER,
                dep_name="redis",
                current_value="7.2",
                current_digest="sha256:cafef00d",
                replace_string=KUSTOMIZATION,
            ),
        ]
    )


def test_replace_string_only_on_images() -> None:
    """Test only image dependencies carry the original file contents."""

    package_file = extract_package_file(KUSTOMIZATION)
    assert package_file
    assert [dep.replace_string for dep in package_file.deps] == [
        None,
        None,
        KUSTOMIZATION,
        KUSTOMIZATION,
    ]


def test_serialize_package_file() -> None:
    """Test the serialized form of the extracted dependencies."""

    package_file = extract_package_file(
        "kind: Kustomization\nresources:\n- github.com/foo/bar?ref=v1.2.3\n"
    )
    assert package_file
    assert package_file.to_dict() == {
        "deps": [
            {
                "datasource": "github-tags",
                "depName": "foo/bar",
                "currentValue": "v1.2.3",
            }
        ]
    }


@pytest.mark.parametrize(
    "content",
    [
        "foo: [bar",
        "kind: Deployment\nimages:\n- name: nginx\n  newTag: '1.19'\n",
        "kind: Kustomization\n",
        (TESTDATA_DIR / "local/kustomization.yaml").read_text(),
        "kind: Kustomization\nbases:\n- ../base\nimages:\n- name: nginx\n",
    ],
    ids=["invalid-yaml", "not-kustomization", "empty", "local-only", "unpinned"],
)
def test_extract_nothing(content: str) -> None:
    """Test content without any extractable dependencies."""

    assert extract_package_file(content) is None


def test_extract_testdata() -> None:
    """Test extracting a kustomization file on disk."""

    content = (TESTDATA_DIR / "apps/podinfo/kustomization.yaml").read_text()
    package_file = extract_package_file(content)
    assert package_file
    assert [
        (dep.datasource, dep.dep_name, dep.current_value) for dep in package_file.deps
    ] == [
        (Datasource.GITHUB_TAGS, "stefanprodan/podinfo", "6.5.4"),
        (Datasource.DOCKER, "ghcr.io/stefanprodan/podinfo", "6.5.4"),
    ]


def test_trace_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Test extraction steps are traced at debug level."""

    with caplog.at_level(logging.DEBUG):
        extract_package_file(KUSTOMIZATION)
    assert "[Trace] > extract_package_file" in caplog.text
    assert "[Trace] < extract_package_file" in caplog.text


@pytest.mark.parametrize(
    ("tag"),
    ["2021-01-01", "on", "1.10"],
    ids=["date", "bool", "float"],
)
def test_unquoted_tag(tag: str) -> None:
    """Test unquoted tags that look like other types are extracted as written."""

    package_file = extract_package_file(
        f"kind: Kustomization\nimages:\n- name: app\n  newTag: {tag}\n"
    )
    assert package_file
    assert package_file.deps[0].current_value == tag


def test_deeply_nested_content() -> None:
    """Test content nested beyond the decoder's limits returns no result."""

    content = "kind: Kustomization\nx: " + "[" * 5000 + "]" * 5000
    assert extract_package_file(content) is None
