"""Built-in checks against project metadata.

:class:`DependencyBlacklistCheck` inspects an npm-style ``package.json``
manifest; :class:`BaseImageWhitelistCheck` inspects the ``FROM`` line of
a ``Dockerfile``.  Both locations default to the working root and can be
overridden per check.
"""

from __future__ import annotations

import json
import logging

from report_card.checks.base import BaseCheck, missing_file
from report_card.checks.models import Result
from report_card.errors import CheckExecutionError

logger = logging.getLogger(__name__)

_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")
_FROM_MARKER = "FROM"


class DependencyBlacklistCheck(BaseCheck):
    """Fail when any blacklisted package is declared in the manifest."""

    type_tag = "DependencyBlacklist"
    aliases = ("CheckNodeDependencies",)

    blacklist: list[str]
    manifest: str = "package.json"

    def execute(self) -> Result:
        data = self.read_target(self.manifest)
        if data is None:
            return missing_file()

        try:
            package = json.loads(data)
        except (ValueError, RecursionError) as exc:
            raise CheckExecutionError(f"unable to parse dependency manifest {self.manifest}: {exc}") from exc
        if not isinstance(package, dict):
            raise CheckExecutionError(f"dependency manifest {self.manifest} is not a JSON object")

        found: list[str] = []
        for section in _DEPENDENCY_SECTIONS:
            deps = package.get(section)
            if not isinstance(deps, dict):
                continue
            found.extend(name for name in self.blacklist if name in deps)

        if found:
            return Result.failure("found the following blacklisted packages: " + ",".join(found))
        return Result.success()


class BaseImageWhitelistCheck(BaseCheck):
    """Fail when the Dockerfile's base image is not whitelisted.

    Only the first line is inspected; it must start with ``FROM``.
    """

    type_tag = "BaseImageWhitelist"
    aliases = ("CheckDockerBaseImage",)

    whitelist: list[str]
    dockerfile: str = "Dockerfile"

    def execute(self) -> Result:
        data = self.read_target(self.dockerfile)
        if data is None:
            return missing_file()

        first_line = data.decode("utf-8", errors="replace").split("\n", 1)[0]
        if not first_line.startswith(_FROM_MARKER):
            raise CheckExecutionError(f"unable to determine base image from {self.dockerfile}")

        image = first_line[len(_FROM_MARKER) :].strip()
        logger.debug("%s uses base image %s", self.dockerfile, image)
        if image in self.whitelist:
            return Result.success()
        return Result.failure(f"dockerfile uses base image not found in whitelist: {image}")
