"""Check registry and factory.

Maps type tags (and their legacy aliases) to :class:`BaseCheck`
subclasses, and builds validated check instances from the loosely-typed
configuration mapping of a :class:`CheckSpec`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from report_card.checks.base import BaseCheck
from report_card.errors import CheckConfigError
from report_card.loader import CheckSpec

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into ``field: message`` pairs."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "(config)"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


class CheckRegistry:
    """Registry for check implementations.

    Maintains a mapping of type tag to :class:`BaseCheck` subclass.  The
    :class:`CheckEngine` uses it to turn each configured check into an
    executable instance.
    """

    def __init__(self) -> None:
        self._checks: dict[str, type[BaseCheck]] = {}
        self._aliases: dict[str, str] = {}

    def register(self, check_cls: type[BaseCheck]) -> None:
        """Register a check class under its ``type_tag`` and ``aliases``.

        Raises
        ------
        ValueError
            If the tag or one of the aliases is already taken.
        """
        tags = (check_cls.type_tag, *check_cls.aliases)
        for tag in tags:
            if tag in self:
                raise ValueError(f"Check type {tag} is already registered. Unregister the existing check first.")
        self._checks[check_cls.type_tag] = check_cls
        for alias in check_cls.aliases:
            self._aliases[alias] = check_cls.type_tag
        logger.debug("Registered check type: %s", check_cls.type_tag)

    def unregister(self, type_tag: str) -> None:
        """Remove a check class and its aliases.

        Raises
        ------
        KeyError
            If the type tag is not registered.
        """
        if type_tag not in self._checks:
            raise KeyError(f"Check type {type_tag} is not registered.")
        del self._checks[type_tag]
        self._aliases = {alias: tag for alias, tag in self._aliases.items() if tag != type_tag}
        logger.debug("Unregistered check type: %s", type_tag)

    def get(self, type_tag: str) -> type[BaseCheck] | None:
        """Look up a check class by tag or alias, or ``None`` if unknown."""
        return self._checks.get(self._aliases.get(type_tag, type_tag))

    def get_types(self) -> list[str]:
        """Return all registered type tags, sorted."""
        return sorted(self._checks)

    def aliases_for(self, type_tag: str) -> list[str]:
        return sorted(alias for alias, tag in self._aliases.items() if tag == type_tag)

    def build(self, name: str, spec: CheckSpec, root: Path) -> BaseCheck | None:
        """Construct the check described by *spec*.

        Returns ``None`` when the type tag is not registered so the caller
        can skip the check.

        Raises
        ------
        CheckConfigError
            If the configuration mapping is missing fields, has fields of
            the wrong shape, or has fields the check does not accept.
        """
        check_cls = self.get(spec.type)
        if check_cls is None:
            return None

        payload: dict[str, Any] = dict(spec.config)
        payload["root"] = root
        try:
            return check_cls.model_validate(payload)
        except ValidationError as exc:
            raise CheckConfigError(name, spec.type, _describe_validation_error(exc)) from exc

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, type_tag: str) -> bool:
        return type_tag in self._checks or type_tag in self._aliases


def create_default_registry() -> CheckRegistry:
    """Return a registry with every built-in check registered."""
    from report_card.checks.builtin import BUILTIN_CHECKS

    registry = CheckRegistry()
    for check_cls in BUILTIN_CHECKS:
        registry.register(check_cls)
    return registry
