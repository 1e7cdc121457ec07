"""Serialise a catalog to the JSON manifest handed to the web UI and back."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from .catalog import Catalog, category_stats
from .schemas import Manifest

logger = logging.getLogger(__name__)

MANIFEST_VERSION = "2.0.0"


def build_manifest(catalog: Catalog, generated: datetime | None = None) -> Manifest:
    return Manifest(
        version=MANIFEST_VERSION,
        generated=generated or datetime.now(timezone.utc),
        total=len(catalog),
        categories=category_stats(catalog),
        icons=list(catalog.entries),
    )


def manifest_to_dict(manifest: Manifest) -> dict:
    return manifest.model_dump(mode="json", by_alias=True)


def write_manifest(manifest: Manifest, path: Path | str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(manifest_to_dict(manifest), indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Manifest saved: %s (%d icons)", target, manifest.total)
    return target


def read_manifest(path: Path | str) -> Catalog:
    """Load a manifest file written by ``write_manifest`` as a catalog."""
    manifest = Manifest.model_validate_json(Path(path).read_text(encoding="utf-8"))
    return Catalog(manifest.icons, source="manifest")
