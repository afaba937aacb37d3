"""Tests for folio.routing.segments: segment classification."""

from folio.routing.segments import (
    CatchAll,
    Group,
    Literal,
    SingleDynamic,
    bracket_count,
    classify,
    has_catch_all,
    is_group,
    strip_groups,
)


class TestClassify:
    def test_literal(self) -> None:
        assert classify("users") == Literal("users")

    def test_group(self) -> None:
        assert classify("(marketing)") == Group("marketing")

    def test_empty_group(self) -> None:
        assert classify("()") == Group("")

    def test_single_dynamic(self) -> None:
        assert classify("[id]") == SingleDynamic("id")

    def test_catch_all(self) -> None:
        assert classify("[...slug]") == CatchAll("slug")

    def test_catch_all_with_static_text(self) -> None:
        token = classify("v-[...slug].txt")
        assert token == CatchAll("slug", prefix="v-", suffix=".txt")
        assert token.marker == "[...slug]"

    def test_catch_all_is_not_single_dynamic(self) -> None:
        assert not isinstance(classify("[...slug]"), SingleDynamic)


class TestMalformedSegments:
    """Malformed brackets fall back to literals instead of failing."""

    def test_unclosed_bracket(self) -> None:
        assert classify("[id") == Literal("[id")

    def test_unopened_bracket(self) -> None:
        assert classify("id]") == Literal("id]")

    def test_empty_brackets(self) -> None:
        assert classify("[]") == Literal("[]")

    def test_nameless_catch_all(self) -> None:
        assert classify("[...]") == Literal("[...]")

    def test_bracket_inside_literal(self) -> None:
        assert classify("user-[id]") == Literal("user-[id]")

    def test_half_group(self) -> None:
        assert classify("(auth") == Literal("(auth")


class TestHelpers:
    def test_is_group(self) -> None:
        assert is_group("(auth)")
        assert not is_group("auth")
        assert not is_group("(")

    def test_strip_groups_keeps_order(self) -> None:
        segments = ("(auth)", "signin", "(nested)", "index.py")
        assert strip_groups(segments) == ("signin", "index.py")

    def test_bracket_count(self) -> None:
        assert bracket_count("users/[id]/index.py") == 1
        assert bracket_count("a/[x]/b/[y]/route.py") == 2
        assert bracket_count("about/route.py") == 0

    def test_has_catch_all(self) -> None:
        assert has_catch_all("docs/[...slug]/route.py")
        assert not has_catch_all("users/[id]/route.py")
