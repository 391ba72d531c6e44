"""Unit tests for modules.translations.discovery."""

from pathlib import Path

import pytest

from modules.translations.discovery import (
    ResourceFile,
    discover_files,
    parse_resource_name,
    resolve_resource_roots,
)


@pytest.mark.unit
class TestParseResourceName:
    def test_three_segments(self):
        resource = parse_resource_name("/app/translations/cart.en.yml")

        assert resource == ResourceFile(
            path=Path("/app/translations/cart.en.yml"),
            domain="cart",
            locale="en",
            format="yml",
        )

    @pytest.mark.parametrize(
        "name", ["readme.txt", "cart.yml", "cart.en.extra.yml", "README"]
    )
    def test_other_segment_counts_are_rejected(self, name):
        assert parse_resource_name(name) is None

    def test_segments_are_not_validated(self):
        resource = parse_resource_name("..yml")

        assert resource is not None
        assert resource.domain == ""
        assert resource.locale == ""


@pytest.mark.unit
class TestDiscoverFiles:
    def test_recursive_sorted(self, write_files):
        root = write_files(
            {
                "sub/cart.fr.yml": "",
                "cart.en.yml": "",
                "admin.en.yml": "",
            }
        )

        files = list(discover_files(root))

        assert files == [
            root / "admin.en.yml",
            root / "cart.en.yml",
            root / "sub" / "cart.fr.yml",
        ]

    def test_directories_are_not_yielded(self, write_files):
        root = write_files({"nested/dir/cart.en.yml": ""})

        assert list(discover_files(root)) == [root / "nested" / "dir" / "cart.en.yml"]

    def test_missing_root_yields_nothing(self, tmp_path):
        assert list(discover_files(tmp_path / "missing")) == []


@pytest.mark.unit
class TestResolveResourceRoots:
    def test_units_are_roots_without_subdirectory(self):
        assert resolve_resource_roots(["a", "b"]) == [Path("a"), Path("b")]

    def test_subdirectory_is_appended(self):
        roots = resolve_resource_roots(["src/Shop", "src/Admin"], "Resources/translations")

        assert roots == [
            Path("src/Shop/Resources/translations"),
            Path("src/Admin/Resources/translations"),
        ]

    def test_duplicates_removed_order_kept(self):
        assert resolve_resource_roots(["b", "a", "b"]) == [Path("b"), Path("a")]
