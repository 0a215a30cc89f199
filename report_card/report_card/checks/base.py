"""Abstract base class for check implementations.

All check types must subclass :class:`BaseCheck`, declare a
``type_tag`` and implement :meth:`execute`.  A check is a frozen
pydantic model: its fields are exactly the configuration keys it
accepts, so constructing one from the config mapping also validates it.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from report_card.checks.models import Result
from report_card.errors import CheckExecutionError

NO_SUCH_FILE = "no such file"


class BaseCheck(BaseModel, abc.ABC):
    """Abstract base for all check implementations.

    Subclasses set :attr:`type_tag` (and optionally :attr:`aliases`) and
    implement :meth:`execute`.  Relative paths are resolved against
    :attr:`root`, the working root of the run, rather than the process
    working directory.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    type_tag: ClassVar[str]
    aliases: ClassVar[tuple[str, ...]] = ()

    root: Path = Field(default=Path("."), exclude=True, description="Working root for relative paths.")

    @abc.abstractmethod
    def execute(self) -> Result:
        """Run the check and return its result.

        Raises
        ------
        CheckExecutionError
            When the check cannot interpret what it found as an outcome.
        """

    def resolve(self, path: str) -> Path:
        """Return *path* resolved against the working root."""
        return self.root / path

    def read_target(self, path: str) -> bytes | None:
        """Read a target file, returning ``None`` if it does not exist.

        Any other I/O error is fatal for the run.
        """
        target = self.resolve(path)
        try:
            return target.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise CheckExecutionError(f"unable to read {target}: {exc}") from exc


def missing_file() -> Result:
    return Result.failure(NO_SUCH_FILE)
