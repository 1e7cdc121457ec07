from __future__ import annotations

import threading
from pathlib import Path

from fastapi import Request

from .catalog import Catalog
from .config import Settings, get_settings
from .icons import Variation
from .indexer import IconIndexer
from .schemas import CatalogEntry


class CatalogStore:
    """Holds the live catalog and swaps in a fresh one on rescan."""

    def __init__(self, indexer: IconIndexer, icons_dir: Path):
        self.indexer = indexer
        self.icons_dir = Path(icons_dir)
        self._catalog: Catalog | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> CatalogStore:
        settings = settings or get_settings()
        return cls(IconIndexer(path_prefix=settings.icon_path_prefix), settings.icons_dir)

    @property
    def current(self) -> Catalog:
        catalog = self._catalog
        if catalog is None:
            return self.rebuild()
        return catalog

    def rebuild(self) -> Catalog:
        with self._lock:
            catalog = self.indexer.index_directory(self.icons_dir)
            self._catalog = catalog
        return catalog

    def read_icon(self, entry: CatalogEntry, variation: Variation | str = Variation.DEFAULT) -> bytes:
        return self.indexer.read_icon(self.icons_dir, entry, variation)


def get_store(request: Request) -> CatalogStore:
    return request.app.state.catalog_store


def get_catalog(request: Request) -> Catalog:
    return get_store(request).current
