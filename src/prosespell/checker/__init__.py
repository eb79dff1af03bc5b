"""Spell checking of extracted prose."""

from prosespell.checker.allowlist import AllowList, AllowListError, default_allow_list, load_allow_list
from prosespell.checker.dictionary import CheckerError, Dictionary
from prosespell.checker.spell import ProseChecker

__all__ = [
    "AllowList",
    "AllowListError",
    "CheckerError",
    "Dictionary",
    "ProseChecker",
    "default_allow_list",
    "load_allow_list",
]
