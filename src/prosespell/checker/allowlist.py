"""The packaged allow-list of domain terms, loaded once per process."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cache
from importlib import resources
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from prosespell.models.errors import ProseSpellError

_ALLOWLIST_RESOURCE = "allowlist.yaml"
_MAX_TERMS = 10_000


class AllowListError(ProseSpellError):
    """Raised when the allow-list file is not a list of terms."""


@dataclass(frozen=True)
class AllowList:
    """Immutable set of accepted terms.

    Matching is exact first, then case-insensitive, so ``Mapbox`` also
    accepts ``mapbox`` and ``MAPBOX``.
    """

    terms: frozenset[str] = frozenset()
    _folded: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        folded: dict[str, str] = {}
        for term in sorted(self.terms):
            folded.setdefault(term.lower(), term)
        object.__setattr__(self, "_folded", folded)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.allows(word)

    def __len__(self) -> int:
        return len(self.terms)

    def allows(self, word: str) -> bool:
        return word in self.terms or word.lower() in self._folded

    def canonical(self, word: str) -> str | None:
        """Return the allow-list spelling of ``word`` (any case), if listed."""
        return self._folded.get(word.lower())


def _terms_from(data: Any, source: str) -> frozenset[str]:
    if data is None:
        return frozenset()
    items = data.get("terms") if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise AllowListError(f"{source}: expected a list of terms under 'terms'")
    if len(items) > _MAX_TERMS:
        raise AllowListError(f"{source}: too many terms ({len(items):,} > {_MAX_TERMS:,})")
    terms: set[str] = set()
    for index, item in enumerate(items):
        if not isinstance(item, str) or not item.strip():
            raise AllowListError(f"{source}: term #{index + 1} is not a non-empty string")
        terms.add(item.strip())
    return frozenset(terms)


def load_allow_list(content: str, source: str = "<string>") -> AllowList:
    """Parse allow-list YAML: either a bare list or a mapping with ``terms``."""
    yaml = YAML(typ="safe")
    try:
        data = yaml.load(content)
    except YAMLError as exc:
        raise AllowListError(f"{source}: invalid YAML ({exc})") from exc
    return AllowList(terms=_terms_from(data, source))


@cache
def default_allow_list() -> AllowList:
    """The allow-list shipped with the package."""
    resource = resources.files("prosespell.checker").joinpath(_ALLOWLIST_RESOURCE)
    return load_allow_list(resource.read_text(encoding="utf-8"), source=_ALLOWLIST_RESOURCE)
