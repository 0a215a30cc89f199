"""Built-in check implementations."""

from report_card.checks.builtin.files import FileExistsCheck, FileHashCheck, FileHasStringCheck
from report_card.checks.builtin.json_documents import FileIsValidJSONCheck, FileMatchesJSONSchemaCheck
from report_card.checks.builtin.project import BaseImageWhitelistCheck, DependencyBlacklistCheck

BUILTIN_CHECKS = (
    FileExistsCheck,
    FileHashCheck,
    FileHasStringCheck,
    FileIsValidJSONCheck,
    FileMatchesJSONSchemaCheck,
    DependencyBlacklistCheck,
    BaseImageWhitelistCheck,
)

__all__ = [
    "BUILTIN_CHECKS",
    "BaseImageWhitelistCheck",
    "DependencyBlacklistCheck",
    "FileExistsCheck",
    "FileHasStringCheck",
    "FileHashCheck",
    "FileIsValidJSONCheck",
    "FileMatchesJSONSchemaCheck",
]
