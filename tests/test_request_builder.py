"""
Tests for URL resolution and body/header production of RequestBuilder.
"""

import pytest
from pydantic import BaseModel

from papyrus.builder import Authorization, RequestBuilder
from papyrus.encoders import JSONEncoder, MultipartEncoder, URLEncodedFormEncoder
from papyrus.errors import EncodingError, URLError
from papyrus.keys import KeyMapping
from papyrus.models import Part


class TestFullURL:
    """Test suite for base/path joining and query strings."""

    @pytest.mark.parametrize(
        "base_url, path",
        [
            ("foo/", "baz"),
            ("foo", "/baz"),
            ("foo/", "/baz"),
            ("foo", "baz"),
        ],
    )
    def test_exactly_one_slash_between_base_and_path(
        self, base_url: str, path: str
    ) -> None:
        """Test that base and path are always separated by a single slash."""
        req = RequestBuilder(base_url=base_url, method="bar", path=path)
        assert req.full_url() == "foo/baz"

    def test_absolute_base_url(self) -> None:
        """Test joining an absolute base URL."""
        req = RequestBuilder(
            base_url="https://api.example.com/v1/", method="GET", path="/users"
        )
        assert req.full_url() == "https://api.example.com/v1/users"

    def test_empty_path_keeps_base(self) -> None:
        """Test that an empty path leaves the base URL untouched."""
        req = RequestBuilder(base_url="https://api.example.com/", method="GET", path="")
        assert req.full_url() == "https://api.example.com/"

    def test_query_parameters_in_insertion_order(self) -> None:
        """Test that queries are appended in the order they were added."""
        req = RequestBuilder(base_url="foo/", method="GET", path="/baz")
        req.add_query("Hello", "There")
        req.add_query("count", 2)
        req.add_query("flag", True)
        req.add_query("skipped", None)
        assert req.full_url() == "foo/baz?Hello=There&count=2&flag=true"

    def test_query_list_becomes_repeated_keys(self) -> None:
        """Test that list values produce one pair per item."""
        req = RequestBuilder(base_url="foo", method="GET", path="baz")
        req.add_query("tag", ["a", "b c"])
        assert req.full_url() == "foo/baz?tag=a&tag=b+c"

    def test_query_appended_to_existing_query(self) -> None:
        """Test that an existing query string is extended with `&`."""
        req = RequestBuilder(base_url="foo", method="GET", path="baz?x=1")
        req.add_query("y", "2")
        assert req.full_url() == "foo/baz?x=1&y=2"

    def test_path_parameters_are_replaced(self) -> None:
        """Test both `{name}` and `:name` placeholders."""
        req = RequestBuilder(
            base_url="https://api.example.com",
            method="GET",
            path="/users/{user_id}/posts/:post_id",
        )
        req.add_parameter("user_id", 42)
        req.add_parameter("post_id", "a b")
        assert req.full_url() == "https://api.example.com/users/42/posts/a%20b"

    def test_query_keys_follow_key_mapping(self) -> None:
        """Test that query keys are converted with the key mapping."""
        req = RequestBuilder(
            base_url="foo",
            method="GET",
            path="baz",
            key_mapping=KeyMapping.camel_case(),
        )
        req.add_query("page_size", 10)
        assert req.full_url() == "foo/baz?pageSize=10"

    def test_none_path_parameter_raises_url_error(self) -> None:
        """Test that a missing path parameter is not rendered as `None`."""
        req = RequestBuilder(base_url="http://x", method="GET", path="/items/{item_id}")

        with pytest.raises(URLError):
            req.add_parameter("item_id", None)

    def test_invalid_url_raises_url_error(self) -> None:
        """Test that a malformed URL raises URLError."""
        req = RequestBuilder(
            base_url="https://api.example.com:notaport", method="GET", path="/users"
        )
        with pytest.raises(URLError):
            req.full_url()


class TestBodyAndHeaders:
    """Test suite for encoded bodies and the headers that describe them."""

    def test_no_fields_has_no_body(self) -> None:
        """Test that a request without fields has no body and zero length."""
        req = RequestBuilder(base_url="foo/", method="GET", path="/baz")
        body, headers = req.body_and_headers()
        assert body is None
        assert dict(headers) == {
            "Content-Type": "application/json",
            "Content-Length": "0",
        }

    def test_json(self) -> None:
        """Test pretty printed JSON with sorted keys."""
        req = RequestBuilder(base_url="foo/", method="bar", path="/baz")
        req.encoder = JSONEncoder(sort_keys=True, indent=2, separators=(",", " : "))
        req.add_field("b", "two")
        req.add_field("a", "one")

        body, headers = req.body_and_headers()

        assert dict(headers) == {
            "Content-Type": "application/json",
            "Content-Length": "32",
        }
        assert body == b'{\n  "a" : "one",\n  "b" : "two"\n}'

    def test_url_form(self) -> None:
        """Test URL-encoded form fields in insertion order."""
        req = RequestBuilder(base_url="foo/", method="bar", path="/baz")
        req.encoder = URLEncodedFormEncoder()
        req.add_field("a", "one")
        req.add_field("b", "two")

        body, headers = req.body_and_headers()

        assert dict(headers) == {
            "Content-Type": "application/x-www-form-urlencoded",
            "Content-Length": "11",
        }
        assert body == b"a=one&b=two"

    def test_multipart(self, mock_boundary: str) -> None:
        """Test a multipart body with one file part and one plain part."""
        req = RequestBuilder(base_url="foo/", method="bar", path="/baz")
        req.encoder = MultipartEncoder(boundary=mock_boundary)
        req.add_field(
            "a", Part(data=b"one", file_name="one.txt", mime_type="text/plain")
        )
        req.add_field("b", Part(data=b"two"))

        body, headers = req.body_and_headers()

        assert dict(headers) == {
            "Content-Type": f"multipart/form-data; boundary={mock_boundary}",
            "Content-Length": "266",
        }
        assert body == (
            f"--{mock_boundary}\r\n"
            'Content-Disposition: form-data; name="a"; filename="one.txt"\r\n'
            "Content-Type: text/plain\r\n"
            "\r\n"
            "one\r\n"
            f"--{mock_boundary}\r\n"
            'Content-Disposition: form-data; name="b"\r\n'
            "\r\n"
            "two\r\n"
            f"--{mock_boundary}--\r\n"
        ).encode()

    def test_repeated_headers_are_kept(self) -> None:
        """Test that adding the same header twice keeps both lines."""
        req = RequestBuilder(base_url="foo", method="GET", path="baz")
        req.add_header("Accept", "application/json")
        req.add_header("Accept", "text/plain")

        _, headers = req.body_and_headers()

        assert [value for key, value in headers if key == "Accept"] == [
            "application/json",
            "text/plain",
        ]

    def test_encoder_headers_win(self) -> None:
        """Test that encoder headers replace caller headers of the same name."""
        req = RequestBuilder(base_url="foo", method="POST", path="baz")
        req.add_header("content-type", "text/xml")
        req.add_field("a", 1)

        _, headers = req.body_and_headers()

        content_types = [value for key, value in headers if key.lower() == "content-type"]
        assert content_types == ["application/json"]

    def test_authorization_replaces_previous(self) -> None:
        """Test that authorization is set once, with the latest credentials."""
        req = RequestBuilder(base_url="foo", method="GET", path="baz")
        req.add_authorization(Authorization.bearer("first"))
        req.add_authorization(Authorization.basic("user", "pass"))

        request = req.build()

        assert request.header("authorization") == "Basic dXNlcjpwYXNz"
        assert len([key for key, _ in request.headers if key == "Authorization"]) == 1

    def test_model_body_is_encoded_as_fields(self) -> None:
        """Test that a pydantic body is encoded through the active encoder."""

        class NewUser(BaseModel):
            user_name: str
            age: int

        req = RequestBuilder(
            base_url="foo",
            method="POST",
            path="users",
            key_mapping=KeyMapping.camel_case(),
        )
        req.set_body(NewUser(user_name="petru", age=30))

        body, _ = req.body_and_headers()

        assert body == b'{"userName":"petru","age":30}'

    def test_list_body_is_encoded_as_json_array(self) -> None:
        """Test that a top level array body goes through the JSON encoder."""
        req = RequestBuilder(
            base_url="foo",
            method="POST",
            path="batch",
            key_mapping=KeyMapping.camel_case(),
        )
        req.set_body([{"item_id": 1}, {"item_id": 2}])

        body, headers = req.body_and_headers()

        assert body == b'[{"itemId":1},{"itemId":2}]'
        assert dict(headers)["Content-Type"] == "application/json"
        assert dict(headers)["Content-Length"] == str(len(body))

    def test_list_body_with_form_encoder_fails(self) -> None:
        """Test that only the JSON encoder accepts an array body."""
        req = RequestBuilder(
            base_url="foo",
            method="POST",
            path="batch",
            encoder=URLEncodedFormEncoder(),
        )
        req.set_body([1, 2])

        with pytest.raises(EncodingError):
            req.body_and_headers()

    def test_raw_bytes_body(self) -> None:
        """Test that a bytes body is sent untouched."""
        req = RequestBuilder(base_url="foo", method="PUT", path="blob")
        req.set_body(b"\x00\x01")

        body, headers = req.body_and_headers()

        assert body == b"\x00\x01"
        assert dict(headers)["Content-Type"] == "application/octet-stream"
        assert dict(headers)["Content-Length"] == "2"

    def test_body_and_fields_conflict(self) -> None:
        """Test that a body and fields cannot be combined."""
        req = RequestBuilder(base_url="foo", method="POST", path="baz")
        req.set_body({"a": 1})
        req.add_field("b", 2)

        with pytest.raises(EncodingError):
            req.body_and_headers()

    def test_part_with_json_encoder_fails(self) -> None:
        """Test that a multipart part is rejected by the JSON encoder."""
        req = RequestBuilder(base_url="foo", method="POST", path="baz")
        req.add_field("file", Part(data=b"data"))

        with pytest.raises(EncodingError):
            req.body_and_headers()

    def test_build_produces_snapshot(self) -> None:
        """Test that build does not keep a link to the builder state."""
        req = RequestBuilder(base_url="foo", method="POST", path="baz")
        req.add_field("a", "one")

        request = req.build()
        req.add_field("b", "two")

        assert request.method == "POST"
        assert request.url == "foo/baz"
        assert request.body == b'{"a":"one"}'
        assert request.header("Content-Length") == "11"
