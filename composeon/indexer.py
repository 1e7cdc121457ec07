"""Scan a folder of SVG icons and fold the files into a categorized catalog."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .catalog import Catalog, IconReadError
from .icons import DEFAULT_INDEXER_CONFIG, IndexerConfig, Variation
from .schemas import CatalogEntry

logger = logging.getLogger(__name__)

SVG_EXTENSION = ".svg"

_UPPERCASE = re.compile(r"([A-Z])")


class DirectoryNotFound(FileNotFoundError):
    """The icons directory is missing or cannot be listed."""

    def __init__(self, path: Path | str):
        super().__init__(f"Icons directory not found: {path}")
        self.path = Path(path)


@dataclass(frozen=True)
class IconIdentity:
    base_name: str
    variation: Variation = Variation.DEFAULT


class IconIndexer:
    """Turns SVG filenames into catalog entries using an ``IndexerConfig``."""

    def __init__(self, config: IndexerConfig = DEFAULT_INDEXER_CONFIG, path_prefix: str = ""):
        self.config = config
        self.path_prefix = path_prefix.strip().rstrip("/")
        self._suffix_by_variation = {variation: suffix for suffix, variation in config.variation_suffixes}
        self._variation_order = {variation: index for index, variation in enumerate(Variation)}

    # -- scanning ---------------------------------------------------------

    def scan(self, directory: Path | str) -> list[str]:
        """Return the ``.svg`` filenames in ``directory``, sorted by name."""
        path = Path(directory)
        try:
            children = sorted(path.iterdir())
        except OSError as exc:
            raise DirectoryNotFound(path) from exc
        return [child.name for child in children if child.name.endswith(SVG_EXTENSION) and child.is_file()]

    def parse_identity(self, filename: str) -> IconIdentity:
        stem = filename[: -len(SVG_EXTENSION)] if filename.endswith(SVG_EXTENSION) else Path(filename).stem
        for suffix, variation in self.config.variation_suffixes:
            # Anchored at the end; a bare "-color" stem keeps its name.
            if len(stem) > len(suffix) and stem.endswith(suffix):
                return IconIdentity(stem[: -len(suffix)], variation)
        return IconIdentity(stem, Variation.DEFAULT)

    # -- per-name derivations --------------------------------------------

    def categorize(self, base_name: str) -> str:
        name = base_name.lower()
        if not name:
            return self.config.default_category
        for category, keywords in self.config.category_keywords.items():
            if any(keyword in name or name in keyword for keyword in keywords):
                return category
        return self.config.default_category

    def display_name(self, base_name: str) -> str:
        special = self.config.special_names.get(base_name.lower())
        if special:
            return special
        spaced = _UPPERCASE.sub(r" \1", base_name.replace("-", " ").replace("_", " "))
        words = [word[:1].upper() + word[1:].lower() for word in spaced.split()]
        return " ".join(words).strip()

    def generate_tags(self, base_name: str, category: str | None = None) -> tuple[str, ...]:
        if category is None:
            category = self.categorize(base_name)
        candidates = [base_name, category, *self.config.tag_synonyms.get(base_name.lower(), ())]
        tags: list[str] = []
        seen: set[str] = set()
        for tag in candidates:
            key = tag.casefold()
            if tag and key not in seen:
                seen.add(key)
                tags.append(tag)
        return tuple(tags)

    def relative_path(self, filename: str) -> str:
        if self.path_prefix:
            return f"{self.path_prefix}/{filename}"
        return filename

    def filename_for(self, base_name: str, variation: Variation) -> str:
        return f"{base_name}{self._suffix_by_variation.get(variation, '')}{SVG_EXTENSION}"

    # -- catalog assembly -------------------------------------------------

    def build_catalog(self, filenames: Iterable[str]) -> list[CatalogEntry]:
        """Group files by base name into one entry each, in first-seen order."""
        groups: dict[str, dict] = {}
        for filename in filenames:
            identity = self.parse_identity(filename)
            group = groups.get(identity.base_name)
            if group is None:
                category = self.categorize(identity.base_name)
                group = groups[identity.base_name] = {
                    "display_name": self.display_name(identity.base_name),
                    "category": category,
                    "tags": self.generate_tags(identity.base_name, category),
                    "paths": {},
                }
            group["paths"][identity.variation] = self.relative_path(filename)

        entries: list[CatalogEntry] = []
        for base_name, group in groups.items():
            variations = sorted(group["paths"], key=self._variation_order.__getitem__)
            entries.append(
                CatalogEntry(
                    name=base_name,
                    display_name=group["display_name"],
                    category=group["category"],
                    tags=group["tags"],
                    variations=tuple(variations),
                    paths={variation.value: group["paths"][variation] for variation in variations},
                )
            )
        return entries

    def sort_catalog(self, entries: Iterable[CatalogEntry]) -> list[CatalogEntry]:
        """Popular names first, then by display name; stable for equal keys."""
        popular = set(self.config.popular)
        return sorted(
            entries,
            key=lambda entry: (entry.name.lower() not in popular, entry.display_name.casefold()),
        )

    def fallback_catalog(self) -> Catalog:
        filenames = [f"{name}{SVG_EXTENSION}" for name in self.config.fallback_icons]
        return Catalog(self.sort_catalog(self.build_catalog(filenames)), source="fallback")

    def index_directory(self, directory: Path | str) -> Catalog:
        """Scan, build and sort; a missing directory yields the fallback catalog."""
        logger.info("Scanning icons directory %s", directory)
        try:
            filenames = self.scan(directory)
        except DirectoryNotFound as exc:
            logger.warning("%s; serving %d fallback icons", exc, len(self.config.fallback_icons))
            return self.fallback_catalog()

        entries = self.sort_catalog(self.build_catalog(filenames))
        logger.info("Found %d SVG files, %d unique icons", len(filenames), len(entries))
        return Catalog(entries, source="directory")

    # -- file access ------------------------------------------------------

    def resolve_variation(self, entry: CatalogEntry, requested: Variation | str = Variation.DEFAULT) -> Variation:
        """Pick the requested variation, else ``default``, else the first available."""
        try:
            wanted = Variation(requested)
        except ValueError:
            wanted = Variation.DEFAULT
        if wanted in entry.variations:
            return wanted
        if Variation.DEFAULT in entry.variations:
            return Variation.DEFAULT
        if entry.variations:
            return entry.variations[0]
        raise IconReadError(entry.name, wanted.value, "no variations recorded")

    def read_icon(
        self,
        directory: Path | str,
        entry: CatalogEntry,
        variation: Variation | str = Variation.DEFAULT,
    ) -> bytes:
        chosen = self.resolve_variation(entry, variation)
        path = Path(directory) / self.filename_for(entry.name, chosen)
        try:
            return path.read_bytes()
        except OSError as exc:
            logger.error("Could not read %s: %s", path, exc)
            raise IconReadError(entry.name, chosen.value, exc.strerror or str(exc)) from exc
