"""Tests for the booru and Wallhaven resolvers."""
import pytest
from yarl import URL

from wallsource.source import BooruResolver, WallhavenResolver
from wallsource.source.resolver import absolute_url, url_from_user_input

NOWHERE = URL("https://nowhere/page.json?a=b")


class TestBooruRequestURL:
    def test_builds_query(self):
        resolver = BooruResolver(host="example.org", api_page="/posts.json")
        url = resolver.build_request_url(["cat", "cute"])
        assert str(url) == "https://example.org/posts.json?limit=1&random=true&tags=cat+cute"

    @pytest.mark.parametrize("tags, joined", [
        ([], ""),
        (["solo"], "solo"),
        (["a", "b", "c"], "a+b+c"),
        (["rating:safe", "blue_sky"], "rating:safe+blue_sky"),
        (["black&white", "x"], "black%26white+x"),
        (["a+b", "c=d"], "a%2Bb+c%3Dd"),
        (["50%", "#1", "two words"], "50%25+%231+two%20words"),
    ])
    def test_tags_joined_with_plus(self, tags, joined):
        url = BooruResolver(host="example.org", api_page="/posts.json").build_request_url(tags)
        assert url.raw_query_string == f"limit=1&random=true&tags={joined}"
        assert set(url.query) == {"limit", "random", "tags"}
        assert url.query.getall("tags") == [" ".join(tags)]

    def test_no_host(self):
        assert BooruResolver(api_page="/posts.json").build_request_url(["cat"]) is None

    def test_api_page_without_slash(self):
        url = BooruResolver(host="example.org", api_page="posts.json").build_request_url([])
        assert url.path == "/posts.json"
        assert url.scheme == "https"
        assert url.host == "example.org"

    def test_deterministic(self):
        resolver = BooruResolver(host="example.org", api_page="/index.php")
        assert resolver.build_request_url(["x"]) == resolver.build_request_url(["x"])


class TestBooruParseResponse:
    resolver = BooruResolver(host="example.org", api_page="/posts.json")

    def test_absolute_file_url(self):
        data = [{"file_url": "https://img.example.org/1.jpg", "id": 1}]
        assert self.resolver.parse_response(data, NOWHERE) == URL("https://img.example.org/1.jpg")

    def test_scheme_relative_file_url(self):
        data = [{"file_url": "//cdn/x.jpg"}]
        assert str(self.resolver.parse_response(data, NOWHERE)) == "https://cdn/x.jpg"

    def test_scheme_relative_keeps_http(self):
        data = [{"file_url": "//cdn/x.jpg"}]
        url = self.resolver.parse_response(data, URL("http://example.org/posts.json"))
        assert str(url) == "http://cdn/x.jpg"

    def test_takes_first_post(self):
        data = [{"file_url": "https://a/1.png"}, {"file_url": "https://a/2.png"}]
        assert str(self.resolver.parse_response(data, NOWHERE)) == "https://a/1.png"

    @pytest.mark.parametrize("data", [
        None, [], {}, "", 0,
        [{}],
        [{"file_url": None}],
        [{"file_url": 42}],
        [{"file_url": ""}],
        [{"file_url": "relative/path.jpg"}],
        ["https://a/1.png"],
        {"file_url": "https://a/1.png"},
        {"posts": [{"file_url": "https://a/1.png"}]},
    ])
    def test_no_result(self, data):
        assert self.resolver.parse_response(data, NOWHERE) is None


class TestWallhaven:
    resolver = WallhavenResolver()

    def test_builds_query(self):
        url = self.resolver.build_request_url(["nature", "mountain"])
        assert str(url) == "https://wallhaven.cc/api/v1/search?sorting=random&q=nature+mountain"

    def test_reserved_characters_stay_in_query(self):
        url = self.resolver.build_request_url(["black&white", "a=b"])
        assert url.raw_query_string == "sorting=random&q=black%26white+a%3Db"
        assert set(url.query) == {"sorting", "q"}
        assert url.query["q"] == "black&white a=b"

    def test_resolves_path(self):
        data = {"data": [{"path": "https://w.example/2.png", "id": "abc"}]}
        assert str(self.resolver.parse_response(data, NOWHERE)) == "https://w.example/2.png"

    def test_lenient_path(self):
        data = {"data": [{"path": "  w.example/3.jpg "}]}
        assert str(self.resolver.parse_response(data, NOWHERE)) == "http://w.example/3.jpg"

    @pytest.mark.parametrize("data", [
        None, [], {}, "",
        {"data": []},
        {"data": None},
        {"data": {}},
        {"data": [{}]},
        {"data": [{"path": ""}]},
        {"data": ["https://w.example/2.png"]},
        [{"path": "https://w.example/2.png"}],
    ])
    def test_no_result(self, data):
        assert self.resolver.parse_response(data, NOWHERE) is None


class TestURLHelpers:
    def test_absolute_url_rejects_non_strings(self):
        assert absolute_url(["https://a"], NOWHERE) is None

    def test_user_input_keeps_scheme(self):
        assert url_from_user_input("https://a.example/x.png") == URL("https://a.example/x.png")

    def test_user_input_blank(self):
        assert url_from_user_input("   ") is None
