"""Tests for folio.routing.layouts: layout chain assembly."""

from folio.routing.layouts import assemble_layouts, render_order
from folio.routing.request import RequestPath
from folio.routing.table import build_route_table


def _paths(chain) -> list[str]:
    return [layout.path for layout in chain]


class TestAssembleLayouts:
    def test_nested_chain_root_to_leaf(self) -> None:
        table = build_route_table(
            [
                "layout.py",
                "dashboard/layout.py",
                "dashboard/users/layout.py",
                "dashboard/users/index.py",
            ]
        )
        chain = assemble_layouts(RequestPath.parse("/dashboard/users"), table)
        assert _paths(chain) == ["dashboard/layout.py", "dashboard/users/layout.py"]

    def test_gaps_are_skipped(self) -> None:
        table = build_route_table(["a/layout.py", "a/b/c/layout.py"])
        chain = assemble_layouts(RequestPath.parse("/a/b/c"), table)
        assert _paths(chain) == ["a/layout.py", "a/b/c/layout.py"]

    def test_falls_back_to_root_layout(self) -> None:
        table = build_route_table(["layout.py", "about/route.py"])
        chain = assemble_layouts(RequestPath.parse("/about"), table)
        assert _paths(chain) == ["layout.py"]

    def test_root_request(self) -> None:
        table = build_route_table(["layout.py", "index.py"])
        assert _paths(assemble_layouts(RequestPath.parse("/"), table)) == ["layout.py"]

    def test_empty_without_root_layout(self) -> None:
        table = build_route_table(["about/route.py"])
        assert assemble_layouts(RequestPath.parse("/about"), table) == ()

    def test_group_directory_replaces_request_walk(self) -> None:
        table = build_route_table(
            ["signin/layout.py", "(auth)/layout.py", "(auth)/signin/index.py"]
        )
        chain = assemble_layouts(
            RequestPath.parse("/signin"),
            table,
            group_dir=("(auth)", "signin"),
        )
        assert _paths(chain) == ["(auth)/layout.py"]

    def test_matched_directory_adds_layouts(self) -> None:
        table = build_route_table(
            ["shop/layout.py", "shop/[item]/layout.py", "shop/[item]/index.py"]
        )
        matched = table.get("shop/[item]/index.py")
        chain = assemble_layouts(RequestPath.parse("/shop/hat"), table, matched=matched)
        assert _paths(chain) == ["shop/layout.py", "shop/[item]/layout.py"]

    def test_no_layout_appears_twice(self) -> None:
        table = build_route_table(["shop/layout.py", "shop/[item]/index.py"])
        matched = table.get("shop/[item]/index.py")
        chain = assemble_layouts(RequestPath.parse("/shop/hat"), table, matched=matched)
        assert _paths(chain) == ["shop/layout.py"]


class TestRenderOrder:
    def test_reverses_chain(self) -> None:
        table = build_route_table(["a/layout.py", "a/b/layout.py"])
        chain = assemble_layouts(RequestPath.parse("/a/b"), table)
        assert _paths(render_order(chain)) == ["a/b/layout.py", "a/layout.py"]

    def test_empty(self) -> None:
        assert render_order(()) == ()
