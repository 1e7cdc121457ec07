"""Read-only icon catalog snapshot and the queries run against it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from types import MappingProxyType

from .icons import DEFAULT_INDEXER_CONFIG
from .schemas import CatalogEntry

DEFAULT_SEARCH_LIMIT = 50
ALL_CATEGORIES = "all"


class IconNotFound(LookupError):
    """No catalog entry carries the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Icon '{name}' not found")
        self.name = name


class IconReadError(OSError):
    """The SVG file behind one icon variation could not be read."""

    def __init__(self, name: str, variation: str, reason: str = ""):
        message = f"Failed to read icon '{name}' ({variation})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.name = name
        self.variation = variation


class Catalog:
    """Immutable, ordered set of catalog entries keyed by name.

    A rescan builds a new ``Catalog``; existing instances are never edited, so a
    reader holding one keeps a consistent view.
    """

    __slots__ = ("_entries", "_by_name", "source")

    def __init__(self, entries: Iterable[CatalogEntry] = (), *, source: str = "directory"):
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)
        self._by_name = MappingProxyType({entry.name: entry for entry in self._entries})
        self.source = source

    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"Catalog(total={len(self._entries)}, source={self.source!r})"

    def get(self, name: str) -> CatalogEntry:
        try:
            return self._by_name[name]
        except KeyError:
            raise IconNotFound(name) from None


def _matches(entry: CatalogEntry, term: str) -> bool:
    if term in entry.name.casefold():
        return True
    if term in entry.display_name.casefold():
        return True
    if term in entry.category.casefold():
        return True
    return any(term in tag.casefold() for tag in entry.tags)


def search_icons(
    catalog: Catalog,
    query: str | None = None,
    category: str | None = None,
    limit: int | None = DEFAULT_SEARCH_LIMIT,
    offset: int = 0,
) -> tuple[list[CatalogEntry], int]:
    """Filter the catalog by category and free text, keeping catalog order.

    Returns the requested window of matches together with the total number of
    matches, so callers can paginate. ``limit=None`` disables truncation.
    """
    results: Sequence[CatalogEntry] = catalog.entries

    if category and category != ALL_CATEGORIES:
        results = [entry for entry in results if entry.category == category]

    term = (query or "").strip().casefold()
    if term:
        results = [entry for entry in results if _matches(entry, term)]

    total = len(results)
    start = max(offset, 0)
    end = None if limit is None else start + max(limit, 0)
    return list(results[start:end]), total


def get_icon(catalog: Catalog, name: str) -> CatalogEntry:
    return catalog.get(name)


def lookup_icons(catalog: Catalog, names: Iterable[str]) -> list[CatalogEntry]:
    """Resolve names in the given order, silently dropping unknown ones."""
    return [catalog.get(name) for name in names if name in catalog]


def popular_icons(
    catalog: Catalog,
    limit: int = 20,
    popular: Iterable[str] = DEFAULT_INDEXER_CONFIG.popular,
) -> list[CatalogEntry]:
    if limit <= 0:
        return []
    return lookup_icons(catalog, popular)[:limit]


def trending_icons(
    catalog: Catalog,
    limit: int = 10,
    trending: Iterable[str] = DEFAULT_INDEXER_CONFIG.trending,
) -> list[CatalogEntry]:
    if limit <= 0:
        return []
    return lookup_icons(catalog, trending)[:limit]


def category_stats(catalog: Catalog) -> dict[str, int]:
    """Count entries per category, in order of first appearance."""
    stats: dict[str, int] = {}
    for entry in catalog:
        stats[entry.category] = stats.get(entry.category, 0) + 1
    return stats
