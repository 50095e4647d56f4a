"""Tests for the document layer: header splitter, YAML parser, TOML serializer."""

import tomllib

import pydantic
import pytest

from zolafm.document import RawDocument, parse_metadata, render_document, split_header
from zolafm.errors import MalformedInputError, ParseError


# ---------------------------------------------------------------------------
# split_header
# ---------------------------------------------------------------------------


class TestSplitHeader:
    def test_splits_header_and_body(self):
        raw = split_header("---\ntitle: x\n---\n# Body\ntext")
        assert raw == RawDocument(header="title: x\n", body="# Body\ntext")

    def test_header_lines_keep_newlines(self):
        raw = split_header("---\na: 1\nb: 2\n---\n")
        assert raw.header == "a: 1\nb: 2\n"

    def test_body_passes_through_verbatim(self):
        body = "  indented\n\n\ttabs   \n---\ntrailing spaces   \n"
        raw = split_header(f"---\ntitle: x\n---\n{body}")
        assert raw.body == body

    def test_only_first_closing_delimiter_ends_header(self):
        raw = split_header("---\na: 1\n---\nintro\n---\nmore")
        assert raw.header == "a: 1\n"
        assert raw.body == "intro\n---\nmore"

    def test_empty_body(self):
        raw = split_header("---\na: 1\n---")
        assert raw.body == ""

    def test_empty_header(self):
        raw = split_header("---\n---\nbody")
        assert raw.header == ""
        assert raw.body == "body"

    def test_missing_opening_delimiter(self):
        with pytest.raises(MalformedInputError):
            split_header("title: x\n---\nbody")

    def test_opening_delimiter_must_match_exactly(self):
        with pytest.raises(MalformedInputError):
            split_header("--- \ntitle: x\n---\n")

    def test_unterminated_header(self):
        with pytest.raises(MalformedInputError, match="unterminated"):
            split_header("---\ntitle: x\nbody without end")

    def test_empty_input(self):
        with pytest.raises(MalformedInputError):
            split_header("")

    def test_custom_delimiter(self):
        raw = split_header("+++\na = 1\n+++\nbody", delimiter="+++")
        assert raw.header == "a = 1\n"

    def test_crlf_delimiters_and_header(self):
        raw = split_header("---\r\ntitle: x\r\n---\r\nbody\r\n")
        assert raw.header == "title: x\n"
        assert raw.body == "body\r\n"

    def test_carriage_returns_kept_in_body(self):
        raw = split_header("---\ntitle: x\n---\na\r\nb\rc")
        assert raw.body == "a\r\nb\rc"

    def test_raw_document_is_frozen(self):
        raw = split_header("---\n---\n")
        with pytest.raises(pydantic.ValidationError):
            raw.body = "changed"


# ---------------------------------------------------------------------------
# parse_metadata
# ---------------------------------------------------------------------------


class TestParseMetadata:
    def test_parses_mapping(self):
        data = parse_metadata("title: Hello\nauthor: jane\n")
        assert data == {"title": "Hello", "author": "jane"}

    def test_preserves_key_order(self):
        data = parse_metadata("b: 1\na: 2\nc: 3\n")
        assert list(data) == ["b", "a", "c"]

    def test_lists_and_nested_mappings(self):
        data = parse_metadata("categories: [a, b]\nextra:\n  inner: x\n")
        assert data["categories"] == ["a", "b"]
        assert data["extra"] == {"inner": "x"}

    def test_unquoted_date_stays_string(self):
        data = parse_metadata("date: 2024-01-05\n")
        assert data["date"] == "2024-01-05"
        assert isinstance(data["date"], str)

    def test_unquoted_datetime_stays_string(self):
        data = parse_metadata("date: 2024-01-05 10:00:00\n")
        assert isinstance(data["date"], str)

    def test_yaml11_booleans_stay_strings(self):
        data = parse_metadata("author: no\ncategories: [rust, on, yes, off, n]\n")
        assert data == {"author": "no", "categories": ["rust", "on", "yes", "off", "n"]}

    @pytest.mark.parametrize("raw, expected", [("true", True), ("False", False), ("TRUE", True)])
    def test_true_false_are_booleans(self, raw, expected):
        assert parse_metadata(f"flag: {raw}\n")["flag"] is expected

    def test_empty_header_is_empty_document(self):
        assert parse_metadata("") == {}

    def test_malformed_yaml(self):
        with pytest.raises(ParseError, match="YAML parse error"):
            parse_metadata("title: [unclosed\n")

    def test_top_level_list_rejected(self):
        with pytest.raises(ParseError, match="not a mapping"):
            parse_metadata("- a\n- b\n")

    def test_top_level_scalar_rejected(self):
        with pytest.raises(ParseError):
            parse_metadata("just text\n")

    def test_non_string_key_rejected(self):
        with pytest.raises(ParseError, match="keys must be strings"):
            parse_metadata("1: one\n")


# ---------------------------------------------------------------------------
# render_document
# ---------------------------------------------------------------------------


def _header_of(rendered: str) -> dict:
    lines = rendered.split("\n")
    assert lines[0] == "+++"
    end = lines.index("+++", 1)
    return tomllib.loads("\n".join(lines[1:end]))


class TestRenderDocument:
    def test_framing(self):
        rendered = render_document({"title": "Hi"}, "# Body")
        assert rendered == '+++\ntitle = "Hi"\n+++\n# Body'

    def test_trailing_newline(self):
        rendered = render_document({"title": "Hi"}, "# Body", trailing_newline=True)
        assert rendered.endswith("# Body\n")

    def test_insertion_order_kept(self):
        rendered = render_document({"title": "T", "date": "2024-01-05T10:00:00Z"}, "")
        assert rendered.index("title") < rendered.index("date")

    def test_nested_taxonomies_table(self):
        metadata = {
            "title": "T",
            "taxonomies": {"author": ["jane"], "category": ["a", "b"]},
        }
        rendered = render_document(metadata, "body")
        assert "[taxonomies]" in rendered
        assert _header_of(rendered) == metadata

    def test_body_untouched(self):
        body = "line one  \n\n```\ncode\n```\n"
        rendered = render_document({"title": "T"}, body)
        assert rendered.endswith("+++\n" + body)

    def test_empty_metadata(self):
        assert render_document({}, "body") == "+++\n+++\nbody"

    def test_quotes_are_escaped(self):
        rendered = render_document({"title": 'Say "hi"'}, "")
        assert _header_of(rendered) == {"title": 'Say "hi"'}
