"""Tests for display fallbacks and summary lines."""

from omani_lexicon.core.enums import ViewMode
from omani_lexicon.core.query import BROWSE_PROMPT, QueryResult, RootGroup, reset, reveal_more
from omani_lexicon.core.query.grouping import MISSING_ROOT_KEY
from omani_lexicon.core.schemas import Record
from omani_lexicon.formatting import (
    Badge,
    badges,
    definition,
    definition_preview,
    details,
    group_count,
    group_title,
    headword,
    result_summary,
    show_more_label,
)


def _records(n):
    return tuple(Record(lex=f"w{i}") for i in range(n))


def test_fallbacks_for_incomplete_records():
    empty = Record()
    assert headword(empty) == "N/A"
    assert definition(empty) == "No definition available"
    assert definition_preview(empty) == "No definition"


def test_definition_preview_truncates():
    text = "x" * 151
    assert definition_preview(Record(definition=text)) == "x" * 150 + "..."
    assert definition_preview(Record(definition="x" * 150)) == "x" * 150


def test_badges_order_and_missing_root():
    record = Record(root="ktb", pos="noun", sem=" ", dialect="Muscat")
    assert badges(record) == [
        Badge("root", "Root: ktb"),
        Badge("pos", "noun"),
        Badge("dialect", "Muscat"),
    ]
    assert badges(Record(root="  "))[0] == Badge("missing", "Missing root")


def test_details_rows_skip_empty_values():
    record = Record.from_mapping({"ref": "Holes 2016", "pg": 112, "etym": "", "id": "7"})
    assert details(record) == [("Reference", "Holes 2016"), ("Page", "112"), ("ID", "7")]


def test_result_summary_lines():
    assert result_summary(BROWSE_PROMPT, ViewMode.LIST, 1234) == (
        "1234 entries loaded. Start typing to search."
    )
    result = QueryResult(_records(250), is_browse_prompt=False)
    window = reset(result.result_set, 100)
    assert result_summary(result, "list", 1234, window) == "Showing first 100 of 250 entries"
    assert result_summary(result, ViewMode.ROOT, 1234) == "Showing 250 entries organized by root"

    single = QueryResult(_records(1), is_browse_prompt=False)
    assert result_summary(single, ViewMode.LIST, 9, reset(single.result_set)) == "Showing 1 entry"
    assert result_summary(single, ViewMode.LIST, 9) == "Showing 1 entry"


def test_show_more_label():
    window = reveal_more(reset(_records(250), 100))
    assert show_more_label(window) == "Show 50 more (50 remaining)"
    assert show_more_label(reveal_more(window)) == ""


def test_group_labels():
    group = RootGroup(key="ktb", members=_records(2))
    missing = RootGroup(key=MISSING_ROOT_KEY, members=_records(1), missing=True)
    assert group_title(group) == "ktb"
    assert group_count(group) == "(2 entries)"
    assert group_title(missing) == "Missing Root Data"
    assert group_count(missing) == "(1 entry)"
