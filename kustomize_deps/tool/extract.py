"""kustomize-deps extract action."""

import dataclasses
import logging
import os
import pathlib
import sys
from argparse import (
    ArgumentParser,
    BooleanOptionalAction,
    _SubParsersAction as SubParsersAction,
)
from typing import Any, cast

import aiofiles
from aiofiles.ospath import exists, isdir

from kustomize_deps import extract
from kustomize_deps.config import DEFAULT_FILE_MATCH, ExtractConfig
from kustomize_deps.context import trace_context
from kustomize_deps.dependency import PackageFile
from kustomize_deps.exceptions import InputException

from .format import JsonFormatter, TableFormatter, YamlFormatter

_LOGGER = logging.getLogger(__name__)

TABLE_COLUMNS = ["file", "datasource", "depName", "currentValue", "currentDigest"]


def find_files(path: pathlib.Path, config: ExtractConfig) -> list[pathlib.Path]:
    """Return the files under the directory that match the config, sorted."""
    found: list[pathlib.Path] = []
    for root, dirs, files in os.walk(path):
        dirs[:] = [name for name in dirs if not name.startswith(".")]
        for name in files:
            file_path = pathlib.Path(root) / name
            if config.matches(file_path.relative_to(path).as_posix()):
                found.append(file_path)
    found.sort()
    return found


async def read_package_file(path: pathlib.Path) -> PackageFile | None:
    """Read a kustomization file from disk and extract its dependencies."""
    try:
        async with aiofiles.open(str(path), encoding="utf-8") as kustomization_file:
            content = await kustomization_file.read()
    except (OSError, UnicodeDecodeError) as err:
        raise InputException(f"Unable to read file {path}: {err}") from err
    with trace_context(str(path)):
        return extract.extract_package_file(content)


async def extract_paths(
    paths: list[pathlib.Path], config: ExtractConfig
) -> list[tuple[pathlib.Path, PackageFile]]:
    """Extract dependencies from files and directories of kustomization files."""
    files: list[pathlib.Path] = []
    for path in paths:
        if not await exists(path):
            raise InputException(f"Path does not exist: {path}")
        if await isdir(path):
            files.extend(find_files(path, config))
        else:
            files.append(path)

    results: list[tuple[pathlib.Path, PackageFile]] = []
    for file_path in files:
        if package_file := await read_package_file(file_path):
            results.append((file_path, package_file))
        else:
            _LOGGER.debug("No dependencies found in %s", file_path)
    return results


class ExtractAction:
    """Extract dependencies from kustomization files."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "extract",
                help="Extract dependencies from kustomization files",
                description=(
                    "Print the remote bases and container images pinned by "
                    "local kustomization files"
                ),
            ),
        )
        args.add_argument(
            "--path",
            type=pathlib.Path,
            action="append",
            help="File or directory of kustomization files, may be repeated",
        )
        args.add_argument(
            "--file-match",
            type=str,
            action="append",
            help=(
                "Regular expression matching kustomization file paths within a "
                f"directory, may be repeated (default {DEFAULT_FILE_MATCH[0]})"
            ),
        )
        args.add_argument(
            "--output",
            "-o",
            choices=["table", "yaml", "json"],
            default="table",
            help="Output format of the command",
        )
        args.add_argument(
            "--replace-string",
            action=BooleanOptionalAction,
            default=True,
            help="Include the replaceString file snapshot in yaml or json output",
        )
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        path: list[pathlib.Path] | None,
        file_match: list[str] | None,
        output: str,
        replace_string: bool,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        config = ExtractConfig(replace_string=replace_string)
        if file_match:
            config.file_match = file_match
        results = await extract_paths(path or [pathlib.Path(".")], config)

        if output == "table":
            rows: list[dict[str, Any]] = []
            for file_path, package_file in results:
                for dep in package_file.deps:
                    rows.append({"file": str(file_path), **dep.to_dict()})
            TableFormatter(TABLE_COLUMNS).print(rows, file=sys.stdout)
            return

        data: list[dict[str, Any]] = []
        for file_path, package_file in results:
            if not config.replace_string:
                package_file = PackageFile(
                    deps=[
                        dataclasses.replace(dep, replace_string=None)
                        for dep in package_file.deps
                    ]
                )
            data.append({"packageFile": str(file_path), **package_file.to_dict()})
        if output == "yaml":
            YamlFormatter().print(data, file=sys.stdout)
        else:
            JsonFormatter().print(data, file=sys.stdout)
