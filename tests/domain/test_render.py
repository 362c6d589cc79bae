"""Tests for the result printer."""

from datetime import timedelta, timezone

import pytest

from epochctl.domain.instant import Instant, InstantOutOfRangeError
from epochctl.domain.render import LABELS, render, to_rfc2822
from tests.conftest import JAN_31_1970

IST = timezone(timedelta(hours=5, minutes=30))


class TestRender:
    def test_four_lines(self) -> None:
        lines = render(Instant(JAN_31_1970), IST)
        assert lines == (
            "2592000",
            "2592000000",
            "Sat, 31 Jan 1970 00:00:00 +0000",
            "Sat, 31 Jan 1970 05:30:00 +0530",
        )

    def test_millis_line_includes_sub_second(self) -> None:
        instant = Instant(1_700_000_000, 123_456_789)
        seconds, millis, _, _ = render(instant, IST)
        assert int(millis) == int(seconds) * 1000 + instant.nanoseconds // 1_000_000

    def test_negative_instant(self) -> None:
        seconds, millis, gmt, _ = render(Instant(-1, 500_000_000), IST)
        assert seconds == "-1"
        assert millis == "-500"
        assert gmt == "Wed, 31 Dec 1969 23:59:59 +0000"

    def test_system_local_zone_by_default(self) -> None:
        _, _, _, local = render(Instant(0))
        assert local[-5] in "+-"

    def test_out_of_range(self) -> None:
        with pytest.raises(InstantOutOfRangeError):
            render(Instant(2**62))

    def test_labels(self) -> None:
        assert len(LABELS) == 4
        assert LABELS[0] == "Epoch timestamp"


def test_to_rfc2822_pads_day() -> None:
    assert to_rfc2822(Instant(0)) == "Thu, 01 Jan 1970 00:00:00 +0000"
