"""Tests for Rich result renderers."""

from epochctl.output.renderers import render_quiet, render_result
from epochctl.services.result import ServiceError, ServiceResult

CONVERSION = {
    "input": 1_700_000_000_123,
    "unit": "milliseconds",
    "notice": "Assuming that timestamp is in milliseconds.",
    "epoch_seconds": 1_700_000_000,
    "epoch_millis": 1_700_000_000_123,
    "nanoseconds": 123_000_000,
    "gmt": "Tue, 14 Nov 2023 22:13:20 +0000",
    "local": "Wed, 15 Nov 2023 03:43:20 +0530",
    "output_fmt": "RFC2822",
}


def _ok(op: str = "convert_epoch", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=data or CONVERSION)


def _err(msg: str = "Could not parse input: [bold]x +0000") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="convert_datetime",
        error=ServiceError(code="UNRECOGNIZED_FORMAT", message=msg, detail={"input": "x +0000"}),
    )


class TestRenderConversion:
    def test_notice_then_four_lines(self) -> None:
        output = render_result(_ok())
        assert output.splitlines() == [
            "Assuming that timestamp is in milliseconds.",
            "Epoch timestamp: 1700000000",
            "Timestamp in milliseconds: 1700000000123",
            "Date and time (GMT): Tue, 14 Nov 2023 22:13:20 +0000",
            "Date and time (your time zone): Wed, 15 Nov 2023 03:43:20 +0530",
        ]

    def test_without_notice(self) -> None:
        data = {k: v for k, v in CONVERSION.items() if k not in ("notice", "unit")}
        output = render_result(_ok("convert_datetime", **data))
        assert output.splitlines()[0] == "Epoch timestamp: 1700000000"
        assert len(output.splitlines()) == 4

    def test_verbose_adds_details(self) -> None:
        output = render_result(_ok(), verbose=True)
        assert output.splitlines()[-3:] == [
            "  unit: milliseconds",
            "  nanoseconds: 123000000",
            "  output_fmt: RFC2822",
        ]

    def test_color_styles_labels(self) -> None:
        output = render_result(_ok(), color=True)
        assert "\x1b[" in output
        assert "Epoch timestamp" in output


class TestRenderError:
    def test_error_line_keeps_brackets(self) -> None:
        output = render_result(_err())
        assert output.startswith("ERROR")
        assert "convert_datetime" in output
        assert "Could not parse input: [bold]x +0000" in output

    def test_verbose_shows_detail(self) -> None:
        output = render_result(_err(), verbose=True)
        assert "detail:" in output
        assert "input: x +0000" in output

    def test_detail_hidden_by_default(self) -> None:
        assert "detail:" not in render_result(_err())


class TestRenderQuiet:
    def test_prints_epoch_seconds(self) -> None:
        assert render_quiet(_ok()) == "1700000000"

    def test_error(self) -> None:
        assert render_quiet(_err("bad")) == "ERROR: convert_datetime — bad"
