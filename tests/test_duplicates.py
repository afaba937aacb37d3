"""Tests for folio.routing.duplicates: duplicate route detection."""

import logging

import pytest

from folio.config import FolioConfig
from folio.routing.duplicates import (
    DuplicateRoute,
    check_duplicate_routes,
    find_duplicates,
    logical_route,
)
from folio.routing.table import build_route_table


class TestLogicalRoute:
    def test_strips_groups(self) -> None:
        table = build_route_table(["(site)/(marketing)/about/route.py"])
        assert logical_route(table.files[0]) == "about/route.py"


class TestFindDuplicates:
    def test_group_collision(self) -> None:
        table = build_route_table(["about/route.py", "(marketing)/about/route.py"])
        assert find_duplicates(table) == [
            DuplicateRoute("about/route.py", ("about/route.py", "(marketing)/about/route.py")),
        ]

    def test_two_groups_collide(self) -> None:
        table = build_route_table(["(a)/signin/index.py", "(b)/signin/index.py"])
        (conflict,) = find_duplicates(table)
        assert conflict.logical_route == "signin/index.py"
        assert conflict.physical_paths == ("(a)/signin/index.py", "(b)/signin/index.py")

    def test_layouts_are_exempt(self) -> None:
        table = build_route_table(["layout.py", "(auth)/layout.py", "(shop)/layout.py"])
        assert find_duplicates(table) == []

    def test_route_and_index_do_not_collide(self) -> None:
        table = build_route_table(["about/index.py", "(x)/about/route.py"])
        assert find_duplicates(table) == []

    def test_other_extensions_are_ignored(self) -> None:
        table = build_route_table(["about/route.html", "(x)/about/route.html"])
        assert find_duplicates(table) == []

    def test_repeated_listing_is_one_file(self) -> None:
        table = build_route_table(
            ["./src/app/a/route.py", "src\\app\\a\\route.py"],
            routes_dir="src/app",
        )
        assert find_duplicates(table) == []

    def test_repeated_listing_still_collides_with_group(self) -> None:
        table = build_route_table(["a/route.py", "./a/route.py", "(g)/a/route.py"])
        (conflict,) = find_duplicates(table)
        assert conflict.physical_paths == ("a/route.py", "(g)/a/route.py")

    def test_no_duplicates(self) -> None:
        table = build_route_table(["index.py", "about/route.py", "(auth)/signin/index.py"])
        assert find_duplicates(table) == []

    def test_reported_in_table_order(self) -> None:
        table = build_route_table(
            [
                "b/route.py",
                "a/route.py",
                "(x)/a/route.py",
                "(x)/b/route.py",
            ]
        )
        assert [c.logical_route for c in find_duplicates(table)] == ["b/route.py", "a/route.py"]


class TestMessages:
    def test_lines(self) -> None:
        conflict = DuplicateRoute("about/route.py", ("about/route.py", "(m)/about/route.py"))
        assert conflict.messages() == [
            "Duplicate route found after normalization: about/route.py",
            "- Grouped original route: about/route.py",
            "- Grouped original route: (m)/about/route.py",
        ]


class TestCheckDuplicateRoutes:
    @pytest.fixture
    def table(self):
        return build_route_table(["about/route.py", "(marketing)/about/route.py"])

    def test_reports_and_logs(self, table, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="folio.routing"):
            conflicts = check_duplicate_routes(table, FolioConfig())
        assert len(conflicts) == 1
        assert "Duplicate route 'about/route.py'" in caplog.text

    def test_skipped_in_production(self, table) -> None:
        assert check_duplicate_routes(table, FolioConfig(production=True)) == []
