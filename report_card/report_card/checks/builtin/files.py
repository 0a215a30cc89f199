"""Built-in checks against single files: existence, content hash and substring."""

from __future__ import annotations

import hashlib
import logging

from pydantic import Field

from report_card.checks.base import BaseCheck, missing_file
from report_card.checks.models import Result
from report_card.errors import CheckExecutionError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


class FileExistsCheck(BaseCheck):
    """Pass when ``path`` names an existing filesystem entry."""

    type_tag = "FileExists"
    aliases = ("CheckFileExists",)

    path: str

    def execute(self) -> Result:
        target = self.resolve(self.path)
        try:
            target.stat()
        except FileNotFoundError:
            return Result.failure()
        except OSError as exc:
            raise CheckExecutionError(f"unable to stat {target}: {exc}") from exc
        return Result.success()


class FileHashCheck(BaseCheck):
    """Pass when the md5 digest of ``path`` equals ``expected-hash``.

    The file is hashed in chunks so large artefacts are not read into
    memory at once.  The expected digest is compared case-insensitively.
    """

    type_tag = "FileHash"
    aliases = ("CheckFileMD5",)

    path: str
    expected_hash: str = Field(..., alias="expected-hash")

    def execute(self) -> Result:
        target = self.resolve(self.path)
        digest = hashlib.md5(usedforsecurity=False)
        try:
            with target.open("rb") as fh:
                for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
                    digest.update(chunk)
        except FileNotFoundError:
            return missing_file()
        except OSError as exc:
            raise CheckExecutionError(f"unable to hash {target}: {exc}") from exc

        actual = digest.hexdigest()
        logger.debug("md5 of %s is %s", target, actual)
        if actual == self.expected_hash.strip().lower():
            return Result.success()
        return Result.failure(f"actual hash was: {actual}")


class FileHasStringCheck(BaseCheck):
    """Pass when the content of ``path`` contains ``substring``."""

    type_tag = "FileHasString"
    aliases = ("CheckFileHasString",)

    path: str
    substring: str

    def execute(self) -> Result:
        data = self.read_target(self.path)
        if data is None:
            return missing_file()
        if self.substring.encode("utf-8") in data:
            return Result.success()
        return Result.failure()
