from dcatsieve.core.matching import FormatMatcher
from dcatsieve.core.records import DcatDistribution, DcatRecord
from dcatsieve.core.selection import NO_MATCH, select_access_url


def _record(*pairs):
    return DcatRecord(distributions=tuple(DcatDistribution(format=f, access_url=u) for f, u in pairs))


def test_selects_matching_distribution():
    record = _record(("CSV", "a"), ("JSON", "b"))

    assert select_access_url(record, FormatMatcher("json")) == "b"


def test_first_match_wins():
    record = _record(("JSON", "first"), ("json", "second"))

    assert select_access_url(record, FormatMatcher("json")) == "first"


def test_no_match_returns_sentinel():
    record = _record(("csv", "a"))

    assert select_access_url(record, FormatMatcher("json")) == NO_MATCH == ""


def test_substring_match_does_not_qualify():
    record = _record(("application/json", "a"), ("JSON", "b"))

    assert select_access_url(record, FormatMatcher("json")) == "b"


def test_record_without_distributions_has_no_match():
    assert select_access_url(DcatRecord(), FormatMatcher(".*")) == NO_MATCH


def test_accepts_duck_typed_records():
    class _Dist:
        def __init__(self, format, access_url):
            self.format = format
            self.access_url = access_url

    class _Record:
        distributions = [_Dist("XML", "x"), _Dist("JSON", "j")]

    assert select_access_url(_Record(), FormatMatcher("xml")) == "x"
