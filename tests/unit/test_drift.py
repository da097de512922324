from envfile.drift import NO_CHANGES, compare_buckets, format_change_report, has_changes
from envfile.parser import parse


def test_missing_and_surplus_by_key():
    result = compare_buckets({"A": "1", "B": "2"}, {"A": "1", "C": "3"})
    assert result == {"missing": {"C": "3"}, "surplus": {"B": "2"}}


def test_differing_value_is_both_missing_and_surplus():
    result = compare_buckets({"A": "local", "SAME": "x"}, {"A": "dist", "SAME": "x"})
    assert result["missing"] == {"A": "dist"}
    assert result["surplus"] == {"A": "local"}


def test_empty_value_differs_from_absent():
    result = compare_buckets({}, {"A": ""})
    assert result["missing"] == {"A": ""}


def test_self_comparison_is_empty():
    bucket = {"A": "1", "B": "1", "C": ""}
    result = compare_buckets(bucket, dict(bucket))
    assert not has_changes(result)
    assert format_change_report(result, "/app/.env") == NO_CHANGES


def test_report_lists_additions_then_surplus():
    result = compare_buckets({"A": "1", "B": "2"}, {"A": "1", "C": "3"})
    report = format_change_report(result, "/app/.env")
    assert report == (
        "# Add to the file /app/.env\n"
        "\n"
        "C=3\n"
        "\n"
        "# Also, these entries are surplus. Remove them?\n"
        "\n"
        "# - B=2\n"
    )


def test_report_without_surplus():
    report = format_change_report(compare_buckets({}, {"X": "1", "Y": "2"}), ".env")
    assert report == "# Add to the file .env\n\nX=1\nY=2\n"


def test_report_follows_bucket_order():
    result = compare_buckets({}, {"Z": "1", "A": "2", "M": "3"})
    lines = format_change_report(result, ".env").splitlines()[2:]
    assert lines == ["Z=1", "A=2", "M=3"]


def test_surplus_only_report_keeps_add_header():
    report = format_change_report(compare_buckets({"B": "2"}, {}), ".env")
    assert report == (
        "# Add to the file .env\n"
        "\n"
        "\n"
        "# Also, these entries are surplus. Remove them?\n"
        "\n"
        "# - B=2\n"
    )


def test_report_values_parse_back_unchanged():
    reference = {"MSG": "two words # not a comment", "MULTI": "a\nb", "Q": 'say "hi"'}
    report = format_change_report(compare_buckets({}, reference), ".env")
    pasted = "".join(report.splitlines(keepends=True)[2:])
    assert parse(pasted, environ={}) == reference
