"""Tests for folio.routing.groups: group folder location."""

from folio.routing.groups import group_directory, locate_group_folder
from folio.routing.table import build_route_table


def _table(*paths: str):
    return build_route_table(paths)


class TestLocateGroupFolder:
    def test_group_hidden_index(self) -> None:
        table = _table("layout.py", "(auth)/signin/index.py")
        assert locate_group_folder(("signin",), table) == "(auth)/signin/index.py"

    def test_literal_route(self) -> None:
        table = _table("about/route.py")
        assert locate_group_folder(("about",), table) == "about/route.py"

    def test_nested_groups(self) -> None:
        table = _table("(site)/(marketing)/pricing/index.py")
        assert locate_group_folder(("pricing",), table) == "(site)/(marketing)/pricing/index.py"

    def test_route_beats_earlier_index(self) -> None:
        table = _table("(a)/x/index.py", "(b)/x/route.py")
        assert locate_group_folder(("x",), table) == "(b)/x/route.py"

    def test_first_route_wins(self) -> None:
        table = _table("(a)/x/route.py", "(b)/x/route.py")
        assert locate_group_folder(("x",), table) == "(a)/x/route.py"

    def test_first_index_wins(self) -> None:
        table = _table("(a)/x/index.py", "(b)/x/index.py")
        assert locate_group_folder(("x",), table) == "(a)/x/index.py"

    def test_explicit_group_segment(self) -> None:
        table = _table("(auth)/signin/index.py")
        assert locate_group_folder(("(auth)", "signin"), table) == "(auth)"

    def test_layouts_are_not_content(self) -> None:
        table = _table("(auth)/signin/layout.py")
        assert locate_group_folder(("signin",), table) == ""

    def test_no_match(self) -> None:
        table = _table("about/route.py")
        assert locate_group_folder(("contact",), table) == ""

    def test_dynamic_routes_are_left_to_the_matcher(self) -> None:
        table = _table("users/[id]/index.py")
        assert locate_group_folder(("users", "42"), table) == ""


class TestGroupDirectory:
    def test_grouped_file(self) -> None:
        assert group_directory("(auth)/signin/index.py") == ("(auth)", "signin")

    def test_ungrouped_file(self) -> None:
        assert group_directory("about/route.py") == ()

    def test_explicit_group_segment(self) -> None:
        assert group_directory("(auth)") == ()

    def test_nothing_located(self) -> None:
        assert group_directory("") == ()
