import pytest

from api_doc_agent.errors import DiscoveryError
from api_doc_agent.parser.routes import (
    filter_route_files,
    locate_route_files,
    matches_route,
    parse_route_patterns,
    to_api_path,
)


class TestToApiPath:
    def test_dynamic_segment(self):
        assert to_api_path("users/[id]/route.ts") == "/users/{id}"

    def test_root_route(self):
        assert to_api_path("route.ts") == "/"

    def test_static_segment(self):
        assert to_api_path("products/route.ts") == "/products"

    def test_nested_dynamic_segments(self):
        assert to_api_path("shops/[shopId]/items/[itemId]/route.js") == "/shops/{shopId}/items/{itemId}"

    def test_windows_separators(self):
        assert to_api_path("users\\[id]\\route.ts") == "/users/{id}"

    def test_leading_dot_directory(self):
        assert to_api_path("./orders/route.ts") == "/orders"

    def test_deterministic(self):
        assert to_api_path("a/[b]/c/route.ts") == to_api_path("a/[b]/c/route.ts")


class TestLocateRouteFiles:
    def test_finds_fixture_routes(self, routes_dir):
        files = locate_route_files(routes_dir)
        assert files == [
            "health/route.ts",
            "orders/[id]/route.ts",
            "products/route.ts",
            "route.ts",
            "users/[id]/route.ts",
            "users/route.ts",
        ]

    def test_ignores_non_route_files(self, routes_dir):
        assert "users/helpers.ts" not in locate_route_files(routes_dir)

    def test_any_extension(self, tmp_path):
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "route.js").write_text("")
        (tmp_path / "route.test.ts").write_text("")
        assert locate_route_files(tmp_path) == ["a/route.js"]

    def test_empty_directory(self, tmp_path):
        assert locate_route_files(tmp_path) == []

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(DiscoveryError):
            locate_route_files(tmp_path / "missing")


class TestMatchesRoute:
    def test_exact(self):
        assert matches_route("/users", "/users")

    def test_exact_trailing_slash(self):
        assert matches_route("/users", "/users/")
        assert matches_route("/users/", "/users")

    def test_exact_no_prefix_match(self):
        assert not matches_route("/users/{id}", "/users")

    def test_wildcard_matches_parent(self):
        assert matches_route("/products", "/products/*")

    def test_wildcard_matches_children(self):
        assert matches_route("/products/123", "/products/*")
        assert matches_route("/products/{id}/reviews", "/products/*")

    def test_wildcard_requires_segment_boundary(self):
        assert not matches_route("/productsale", "/products/*")


class TestFilterRouteFiles:
    FILES = [
        "users/route.ts",
        "users/[id]/route.ts",
        "products/route.ts",
        "products/[id]/route.ts",
        "orders/route.ts",
    ]

    def test_no_patterns_returns_all(self):
        assert filter_route_files(self.FILES) == self.FILES
        assert filter_route_files(self.FILES, []) == self.FILES

    def test_exact_and_wildcard(self):
        result = filter_route_files(self.FILES, ["/users", "/products/*"])
        assert result == ["users/route.ts", "products/route.ts", "products/[id]/route.ts"]

    def test_no_match(self):
        assert filter_route_files(self.FILES, ["/payments"]) == []


class TestParseRoutePatterns:
    def test_split_and_strip(self):
        assert parse_route_patterns(" /users, /products/* ,") == ["/users", "/products/*"]

    def test_empty(self):
        assert parse_route_patterns(None) == []
        assert parse_route_patterns("") == []
