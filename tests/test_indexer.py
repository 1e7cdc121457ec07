"""Tests for filename parsing, categorization and catalog assembly."""

import pytest

from composeon.catalog import IconReadError
from composeon.icons import IndexerConfig, Variation
from composeon.indexer import DirectoryNotFound, IconIdentity, IconIndexer

from conftest import write_icons


@pytest.mark.parametrize(
    ("filename", "base_name", "variation"),
    [
        ("openai.svg", "openai", Variation.DEFAULT),
        ("openai-color.svg", "openai", Variation.COLOR),
        ("aws-text.svg", "aws", Variation.TEXT),
        ("adobe-brand.svg", "adobe", Variation.BRAND),
        ("github-mono.svg", "github", Variation.MONO),
        ("google-cloud-color.svg", "google-cloud", Variation.COLOR),
    ],
)
def test_parse_identity_strips_variation_suffix(indexer, filename, base_name, variation):
    assert indexer.parse_identity(filename) == IconIdentity(base_name, variation)


@pytest.mark.parametrize("filename", ["adobe-brandx.svg", "colorful.svg", "mono-lake.svg", "text.svg"])
def test_parse_identity_only_matches_trailing_suffix(indexer, filename):
    identity = indexer.parse_identity(filename)
    assert identity.variation is Variation.DEFAULT
    assert identity.base_name == filename[: -len(".svg")]


def test_parse_identity_keeps_bare_suffix_name(indexer):
    assert indexer.parse_identity("-color.svg") == IconIdentity("-color", Variation.DEFAULT)


def test_categorize_known_and_unknown(indexer):
    assert indexer.categorize("openai") == "ai"
    assert indexer.categorize("github") == "dev"
    assert indexer.categorize("figma") == "design"
    assert indexer.categorize("unknownxyz123") == "other"


def test_categorize_is_deterministic(indexer):
    assert indexer.categorize("postgresql") == indexer.categorize("postgresql") == "database"


def test_categorize_matches_substrings_both_ways(indexer):
    # keyword inside the name
    assert indexer.categorize("awsicon") == "cloud"
    # name inside a keyword
    assert indexer.categorize("kuber") == "dev"
    assert indexer.categorize("OpenAI") == "ai"


def test_categorize_uses_declaration_order_for_ties():
    config = IndexerConfig(category_keywords={"first": ["git"], "second": ["github"]})
    custom = IconIndexer(config=config)
    assert custom.categorize("github") == "first"
    assert custom.categorize("figma") == "other"


def test_config_tables_are_read_only():
    config = IndexerConfig(category_keywords={"tools": ["Hammer"]})
    assert config.category_keywords["tools"] == ("hammer",)
    with pytest.raises(TypeError):
        config.category_keywords["extra"] = ("x",)
    assert config.categories == ("tools", "other")


@pytest.mark.parametrize(
    ("base_name", "expected"),
    [
        ("openai", "OpenAI"),
        ("VSCode", "VS Code"),
        ("figma", "Figma"),
        ("google-cloud", "Google Cloud"),
        ("hugging_face", "Hugging Face"),
        ("myIcon", "My Icon"),
        ("--odd--name", "Odd Name"),
    ],
)
def test_display_name(indexer, base_name, expected):
    assert indexer.display_name(base_name) == expected


def test_generate_tags_includes_name_category_and_synonyms(indexer):
    tags = indexer.generate_tags("github")
    assert tags[:2] == ("github", "dev")
    assert "git" in tags
    assert "version control" in tags


def test_tag_synonym_keys_are_case_insensitive():
    custom = IconIndexer(config=IndexerConfig(tag_synonyms={"GitHub": ["octocat"]}))
    assert custom.config.tag_synonyms == {"github": ("octocat",)}
    assert "octocat" in custom.generate_tags("github")


def test_generate_tags_without_synonyms(indexer):
    assert indexer.generate_tags("figma") == ("figma", "design")


def test_build_catalog_folds_variations(indexer):
    entries = indexer.build_catalog(["aws.svg", "aws-color.svg", "aws-text.svg"])

    assert len(entries) == 1
    entry = entries[0]
    assert entry.name == "aws"
    assert set(entry.variations) == {Variation.DEFAULT, Variation.COLOR, Variation.TEXT}
    assert entry.paths == {"default": "aws.svg", "color": "aws-color.svg", "text": "aws-text.svg"}
    assert entry.display_name == "AWS"
    assert entry.category == "cloud"


def test_build_catalog_has_one_entry_per_base_name(indexer):
    files = ["a-color.svg", "b.svg", "a.svg", "c-mono.svg", "b-text.svg", "a-brand.svg"]
    entries = indexer.build_catalog(files)
    names = [entry.name for entry in entries]

    assert len(names) == len(set(names))
    assert set(names) == {indexer.parse_identity(f).base_name for f in files}


def test_build_catalog_applies_path_prefix():
    prefixed = IconIndexer(path_prefix="lobe-icons/packages/static-svg/icons/")
    entry = prefixed.build_catalog(["figma-color.svg"])[0]
    assert entry.paths == {"color": "lobe-icons/packages/static-svg/icons/figma-color.svg"}


def test_github_and_figma_scenario(indexer):
    entries = indexer.sort_catalog(indexer.build_catalog(["github.svg", "github-color.svg", "figma.svg"]))
    by_name = {entry.name: entry for entry in entries}

    assert set(by_name) == {"github", "figma"}
    assert set(by_name["github"].variations) == {Variation.DEFAULT, Variation.COLOR}
    assert by_name["github"].category == "dev"
    assert by_name["github"].display_name == "GitHub"
    assert set(by_name["figma"].variations) == {Variation.DEFAULT}
    assert by_name["figma"].category == "design"
    assert by_name["figma"].display_name == "Figma"


def test_sort_catalog_puts_popular_first(indexer):
    entries = indexer.build_catalog(["zeta.svg", "github.svg", "alpha.svg", "aws.svg"])
    ordered = [entry.name for entry in indexer.sort_catalog(entries)]
    assert ordered == ["aws", "github", "alpha", "zeta"]


def test_sort_catalog_is_stable_for_equal_display_names(indexer):
    config = IndexerConfig(special_names={"first": "Same", "second": "Same"}, popular=())
    custom = IconIndexer(config=config)
    entries = custom.build_catalog(["second.svg", "first.svg"])
    assert [entry.name for entry in custom.sort_catalog(entries)] == ["second", "first"]


def test_scan_lists_only_svg_files(indexer, icons_dir):
    (icons_dir / "nested.svg").mkdir()
    files = indexer.scan(icons_dir)
    assert "readme.txt" not in files
    assert "nested.svg" not in files
    assert files == sorted(files)
    assert "aws-color.svg" in files


def test_scan_missing_directory_raises(indexer, tmp_path):
    with pytest.raises(DirectoryNotFound):
        indexer.scan(tmp_path / "missing")


def test_index_directory_falls_back_when_missing(indexer, tmp_path):
    catalog = indexer.index_directory(tmp_path / "missing")
    assert catalog.source == "fallback"
    assert "openai" in catalog
    assert len(catalog) == len(indexer.config.fallback_icons)


def test_index_directory_empty_directory_gives_empty_catalog(indexer, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    catalog = indexer.index_directory(empty)
    assert catalog.source == "directory"
    assert len(catalog) == 0


def test_index_directory_builds_sorted_catalog(indexer, icons_dir):
    catalog = indexer.index_directory(icons_dir)
    names = [entry.name for entry in catalog]
    assert names == ["aws", "docker", "figma", "github", "openai"]


def test_read_icon_prefers_requested_variation(indexer, icons_dir):
    catalog = indexer.index_directory(icons_dir)
    content = indexer.read_icon(icons_dir, catalog.get("aws"), "color")
    assert b"<title>aws-color</title>" in content


def test_read_icon_falls_back_to_default(indexer, icons_dir):
    catalog = indexer.index_directory(icons_dir)
    content = indexer.read_icon(icons_dir, catalog.get("figma"), Variation.BRAND)
    assert b"<title>figma</title>" in content


def test_read_icon_missing_file_raises_for_that_icon_only(indexer, tmp_path):
    directory = write_icons(tmp_path / "icons", ["docker.svg", "figma.svg"])
    catalog = indexer.index_directory(directory)
    (directory / "docker.svg").unlink()

    with pytest.raises(IconReadError) as excinfo:
        indexer.read_icon(directory, catalog.get("docker"))
    assert excinfo.value.name == "docker"
    assert indexer.read_icon(directory, catalog.get("figma")).startswith(b"<svg")
