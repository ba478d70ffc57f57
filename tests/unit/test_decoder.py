"""Tests for decoding the raw feed into entries."""

import json

import pytest

from movielocations.feed.decoder import FeedDecodeError, decode_entries
from movielocations.feed.models import RawEntry


def encode(records: list) -> bytes:
    return json.dumps(records).encode("utf-8")


class TestDecodeEntries:
    def test_decodes_all_fields(self) -> None:
        entries = decode_entries(
            encode(
                [
                    {
                        "title": "Vertigo",
                        "release_year": "1958",
                        "locations": "Fort Point",
                        "fun_facts": "Under the Golden Gate Bridge.",
                        "production_company": "Alfred J. Hitchcock Productions",
                        "distributor": "Paramount Pictures",
                        "director": "Alfred Hitchcock",
                        "writer": "Alec Coppel",
                        "actor_1": "James Stewart",
                        "actor_2": "Kim Novak",
                        "actor_3": "Barbara Bel Geddes",
                    }
                ]
            )
        )
        assert len(entries) == 1
        entry = entries[0]
        assert entry.title == "Vertigo"
        assert entry.release_year == "1958"
        assert entry.locations == "Fort Point"
        assert entry.distributor == "Paramount Pictures"
        assert entry.actors == ["James Stewart", "Kim Novak", "Barbara Bel Geddes"]

    def test_missing_fields_decode_to_empty(self) -> None:
        entry = decode_entries(encode([{"title": "Bullitt"}]))[0]
        assert entry.locations == ""
        assert entry.director == ""
        assert entry.actors == []

    def test_normalizes_whitespace_and_sentinel(self) -> None:
        entry = decode_entries(
            encode([{"title": " Bullitt ", "locations": "  N/A ", "actor_1": "N/A", "actor_2": " Steve McQueen"}])
        )[0]
        assert entry.title == "Bullitt"
        assert entry.locations == ""
        assert entry.actors == ["Steve McQueen"]

    def test_null_fields_decode_to_empty(self) -> None:
        entry = decode_entries(encode([{"title": "Bullitt", "writer": None}]))[0]
        assert entry.writer == ""

    def test_numeric_release_year_is_accepted(self) -> None:
        entry = decode_entries(encode([{"title": "Bullitt", "release_year": 1968}]))[0]
        assert entry.release_year == "1968"

    def test_ignores_unknown_fields(self) -> None:
        entry = decode_entries(encode([{"title": "Bullitt", "smile_again": "yes"}]))[0]
        assert entry == RawEntry(title="Bullitt")

    def test_accepts_text_input(self) -> None:
        assert decode_entries('[{"title": "Bullitt"}]')[0].title == "Bullitt"

    def test_empty_array(self) -> None:
        assert decode_entries(b"[]") == []

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(FeedDecodeError):
            decode_entries(b'[{"title": "\xff\xfe"}]')

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(FeedDecodeError):
            decode_entries(b'[{"title": "Bullitt"')

    def test_non_array_raises(self) -> None:
        with pytest.raises(FeedDecodeError):
            decode_entries(b'{"title": "Bullitt"}')

    def test_nested_values_raise(self) -> None:
        with pytest.raises(FeedDecodeError):
            decode_entries(encode([{"title": {"en": "Bullitt"}}]))

    def test_decode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_entries(b"not json")
