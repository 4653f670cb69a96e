"""
Tests for the JSON and URL-encoded form field encoders.
"""

import json
from datetime import datetime, timezone
from uuid import UUID

import pytest
from pydantic import BaseModel

from papyrus.encoders import JSONEncoder, URLEncodedFormEncoder
from papyrus.errors import EncodingError
from papyrus.keys import KeyMapping
from papyrus.models import Part


class Address(BaseModel):
    street_name: str
    zip_code: str


class TestJSONEncoder:
    """Test suite for JSONEncoder."""

    def test_compact_by_default(self) -> None:
        """Test the default compact output and headers."""
        body, headers = JSONEncoder().encode({"a": "one", "b": 2})

        assert body == b'{"a":"one","b":2}'
        assert headers == {"Content-Type": "application/json", "Content-Length": "17"}

    def test_rich_values(self) -> None:
        """Test that models, datetimes and UUIDs are serialized."""
        body, _ = JSONEncoder().encode(
            {
                "address": Address(street_name="Main", zip_code="123"),
                "at": datetime(2000, 1, 1, tzinfo=timezone.utc),
                "id": UUID("12345678-1234-5678-1234-567812345678"),
            }
        )

        assert json.loads(body) == {
            "address": {"street_name": "Main", "zip_code": "123"},
            "at": "2000-01-01T00:00:00Z",
            "id": "12345678-1234-5678-1234-567812345678",
        }

    def test_key_mapping_applies_to_nested_keys(self) -> None:
        """Test that the key mapping reaches nested objects."""
        encoder = JSONEncoder().with_key_mapping(KeyMapping.camel_case())

        body, _ = encoder.encode(
            {"home_address": Address(street_name="Main", zip_code="123")}
        )

        assert json.loads(body) == {
            "homeAddress": {"streetName": "Main", "zipCode": "123"}
        }

    def test_with_key_mapping_does_not_mutate(self) -> None:
        """Test that with_key_mapping returns a copy."""
        encoder = JSONEncoder()
        snake = encoder.with_key_mapping(KeyMapping.snake_case())

        assert encoder.key_mapping is None
        assert snake.key_mapping is not None

    def test_part_is_rejected(self) -> None:
        """Test that multipart parts fail fast."""
        with pytest.raises(EncodingError):
            JSONEncoder().encode({"file": Part(data=b"x")})

    def test_unserializable_value_fails(self) -> None:
        """Test that values pydantic cannot serialize raise EncodingError."""

        class Opaque:
            pass

        with pytest.raises(EncodingError):
            JSONEncoder().encode({"value": Opaque()})


class TestURLEncodedFormEncoder:
    """Test suite for URLEncodedFormEncoder."""

    def test_percent_encoding(self) -> None:
        """Test that reserved characters are percent-encoded."""
        body, headers = URLEncodedFormEncoder().encode(
            {"q": "a b&c", "emoji": "é"}
        )

        assert body == b"q=a+b%26c&emoji=%C3%A9"
        assert headers["Content-Type"] == "application/x-www-form-urlencoded"

    def test_nested_values_are_flattened(self) -> None:
        """Test bracket notation for mappings and lists."""
        body, _ = URLEncodedFormEncoder().encode(
            {"user": {"name": "petru"}, "tags": ["a", "b"], "active": True, "none": None}
        )

        assert body == (
            b"user%5Bname%5D=petru&tags%5B%5D=a&tags%5B%5D=b&active=true"
        )

    def test_key_mapping(self) -> None:
        """Test that field keys follow the key mapping."""
        encoder = URLEncodedFormEncoder(key_mapping=KeyMapping.camel_case())

        body, _ = encoder.encode({"first_name": "petru"})

        assert body == b"firstName=petru"

    def test_part_is_rejected(self) -> None:
        """Test that multipart parts fail fast."""
        with pytest.raises(EncodingError):
            URLEncodedFormEncoder().encode({"file": Part(data=b"x")})
