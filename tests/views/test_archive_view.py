"""Tests for the archive view."""

import pytest

from viewmap.core.exceptions import InvalidDateError
from viewmap.core.utils.dates import parse_timestamp
from viewmap.views import archive, collect


@pytest.mark.smoke
class TestArchive:
    def test_components(self):
        doc = {"type": "entry", "created-at": "2023-05-07T03:04:05.123Z"}
        assert collect(archive, doc) == [["2023", "05", "07", "03", "04", "05"]]

    def test_exactly_one_key(self, entry):
        assert len(collect(archive, entry)) == 1

    def test_normalized_to_utc(self):
        doc = {"type": "entry", "created-at": "2024-01-01T00:30:00-05:00"}
        assert collect(archive, doc) == [["2024", "01", "01", "05", "30", "00"]]

    def test_day_rollover(self):
        doc = {"type": "entry", "created-at": "2024-03-01T00:15:00+01:00"}
        assert collect(archive, doc) == [["2024", "02", "29", "23", "15", "00"]]

    def test_seconds_truncated_not_rounded(self):
        doc = {"type": "entry", "created-at": "2023-05-07T03:04:05.999Z"}
        assert collect(archive, doc)[0][-1] == "05"

    def test_without_fraction(self):
        doc = {"type": "entry", "created-at": "2023-05-07T03:04:05Z"}
        assert collect(archive, doc) == [["2023", "05", "07", "03", "04", "05"]]

    def test_non_entry(self, comment):
        assert collect(archive, comment) == []

    def test_non_entry_with_bad_date(self):
        assert collect(archive, {"type": "comment", "created-at": "not-a-date"}) == []

    def test_invalid_date(self):
        with pytest.raises(InvalidDateError):
            collect(archive, {"type": "entry", "created-at": "not-a-date"})

    def test_missing_date(self):
        with pytest.raises(InvalidDateError):
            collect(archive, {"type": "entry"})

    def test_failure_emits_nothing(self):
        emitted = []
        with pytest.raises(InvalidDateError):
            archive({"type": "entry", "created-at": 1683428645}, emitted.append)
        assert emitted == []

    def test_lexicographic_is_chronological(self):
        stamps = [
            "2023-05-07T03:04:05.123Z",
            "1999-12-31T23:59:59Z",
            "2023-05-07T03:04:05.900Z",
            "2023-05-07T03:04:06Z",
            "2023-11-02T09:00:00+09:00",
            "2023-05-06T23:00:00-05:00",
            "2000-01-01",
        ]
        keys = {s: "".join(collect(archive, {"type": "entry", "created-at": s})[0]) for s in stamps}
        for a in stamps:
            for b in stamps:
                if parse_timestamp(a).replace(microsecond=0) < parse_timestamp(b).replace(microsecond=0):
                    assert keys[a] < keys[b]

    def test_same_document_same_key(self, entry):
        assert collect(archive, entry) == collect(archive, entry)
