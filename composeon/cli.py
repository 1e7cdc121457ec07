#!/usr/bin/env python3
"""Index a folder of SVG icons and query the resulting catalog.

Usage:
    composeon [--icons-dir DIR] scan [--output FILE]
    composeon search QUERY [--category CAT] [--limit N] [--manifest FILE]
    composeon show NAME
    composeon stats
    composeon post NAME [NAME ...] [--template ID]
"""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from pathlib import Path

from .catalog import Catalog, IconNotFound, category_stats, search_icons
from .config import configure_logging, get_settings
from .indexer import IconIndexer
from .manifest import build_manifest, read_manifest, write_manifest
from .posts import DEFAULT_TEMPLATE, available_templates, generate_post


class ManifestMissing(FileNotFoundError):
    """A --manifest path was given but no file exists there."""


def _load_catalog(args: argparse.Namespace) -> Catalog:
    manifest_path: Path | None = getattr(args, "manifest", None)
    if manifest_path is not None:
        if not manifest_path.is_file():
            raise ManifestMissing(f"Manifest not found: {manifest_path}")
        return read_manifest(manifest_path)
    settings = get_settings()
    indexer = IconIndexer(path_prefix=settings.icon_path_prefix)
    return indexer.index_directory(args.icons_dir or settings.icons_dir)


def cmd_scan(args: argparse.Namespace) -> int:
    settings = get_settings()
    icons_dir = args.icons_dir or settings.icons_dir
    output = args.output or settings.manifest_path

    print(f"➤ Scanning icons directory {icons_dir}…")
    catalog = IconIndexer(path_prefix=settings.icon_path_prefix).index_directory(icons_dir)
    if catalog.source == "fallback":
        print(f"⚠ Icons directory not found; using {len(catalog)} fallback icons")
    elif not len(catalog):
        print("ℹ No SVG files found.")

    manifest = build_manifest(catalog)
    write_manifest(manifest, output)
    print(f"✓ Manifest saved: {output}")
    print(f"✓ Total: {manifest.total} icons")
    print(f"✓ Categories: {', '.join(f'{name} ({count})' for name, count in manifest.categories.items())}")
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    catalog = _load_catalog(args)
    results, total = search_icons(catalog, query=args.query, category=args.category, limit=args.limit)
    for entry in results:
        print(f"{entry.name:<24} {entry.display_name:<28} {entry.category:<12} {', '.join(entry.variations)}")
    print(f"ℹ Showing {len(results)} of {total} matches")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    catalog = _load_catalog(args)
    try:
        entry = catalog.get(args.name)
    except IconNotFound as exc:
        print(f"✗ {exc}")
        return 1
    print(json.dumps(entry.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
    return 0


def cmd_post(args: argparse.Namespace) -> int:
    catalog = _load_catalog(args)
    result = generate_post(catalog, args.names, template=args.template)
    if not result.selected_icons:
        print("✗ None of the requested icons are in the catalog")
        return 1
    print(result.post)
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    catalog = _load_catalog(args)
    print(f"Total: {len(catalog)} icons ({catalog.source})")
    for name, count in category_stats(catalog).items():
        print(f"  {name:<14} {count}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="composeon", description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--icons-dir", type=Path, default=None, help="Directory of SVG icons (default: $ICONS_DIR)")
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Index the icons directory and write the manifest")
    scan.add_argument("--output", type=Path, default=None, help="Manifest file (default: $MANIFEST_PATH)")
    scan.set_defaults(func=cmd_scan)

    search = sub.add_parser("search", help="Search icons by name, category or tag")
    search.add_argument("query", nargs="?", default="")
    search.add_argument("--category", default="all")
    search.add_argument("--limit", type=int, default=get_settings().default_search_limit)
    search.add_argument("--manifest", type=Path, default=None, help="Read a manifest instead of scanning")
    search.set_defaults(func=cmd_search)

    show = sub.add_parser("show", help="Print one catalog entry")
    show.add_argument("name")
    show.add_argument("--manifest", type=Path, default=None)
    show.set_defaults(func=cmd_show)

    post = sub.add_parser("post", help="Generate LinkedIn post text for some icons")
    post.add_argument("names", nargs="+")
    post.add_argument("--template", default=DEFAULT_TEMPLATE, help=f"One of: {', '.join(available_templates())}")
    post.add_argument("--manifest", type=Path, default=None)
    post.set_defaults(func=cmd_post)

    stats = sub.add_parser("stats", help="Count icons per category")
    stats.add_argument("--manifest", type=Path, default=None)
    stats.set_defaults(func=cmd_stats)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        return args.func(args)
    except ManifestMissing as exc:
        print(f"✗ {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
