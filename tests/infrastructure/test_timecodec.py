"""Tests for the built-in ISO time codec."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from docfactory import Instant, IsoTimeCodec, TimeCodec, UtcInstant


class TestIsoTimeCodec:
    def test_satisfies_protocols(self, codec: IsoTimeCodec) -> None:
        assert isinstance(codec, TimeCodec)
        assert isinstance(codec.utc("2016-03-09T08:00:00Z"), Instant)

    def test_offset_converted_to_utc(self, codec: IsoTimeCodec) -> None:
        assert codec.utc("2016-03-09T08:00:00-04:00").format() == "2016-03-09T12:00:00Z"

    def test_z_suffix(self, codec: IsoTimeCodec) -> None:
        instant = codec.utc("2016-03-09T04:23:22Z")
        assert instant.value == datetime(2016, 3, 9, 4, 23, 22, tzinfo=UTC)

    def test_naive_treated_as_utc(self, codec: IsoTimeCodec) -> None:
        assert codec.utc("2016-03-09T04:23:22").format() == "2016-03-09T04:23:22Z"

    def test_same_instant_regardless_of_offset(self, codec: IsoTimeCodec) -> None:
        assert codec.utc("2016-03-09T08:00:00-04:00") == codec.utc("2016-03-09T13:00:00+01:00")

    def test_round_trip(self, codec: IsoTimeCodec) -> None:
        instant = codec.utc("2016-03-09T00:23:22-04:00")
        assert codec.utc(instant.format()) == instant

    def test_early_year_is_zero_padded(self, codec: IsoTimeCodec) -> None:
        instant = codec.utc("0999-01-01T00:00:00Z")
        assert instant.format() == "0999-01-01T00:00:00Z"
        assert codec.utc(instant.format()) == instant

    def test_microseconds_kept(self, codec: IsoTimeCodec) -> None:
        assert codec.utc("2016-03-09T04:23:22.500000Z").format() == "2016-03-09T04:23:22.500000Z"

    def test_invalid_text(self, codec: IsoTimeCodec) -> None:
        with pytest.raises(ValueError):
            codec.utc("not a time")


class TestUtcInstant:
    def test_offset_value_formats_in_utc(self) -> None:
        local = datetime(2016, 3, 9, 8, 0, tzinfo=timezone(timedelta(hours=-4)))
        assert UtcInstant(local).format() == "2016-03-09T12:00:00Z"

    def test_naive_value_taken_as_utc(self) -> None:
        assert UtcInstant(datetime(2016, 3, 9)).format() == "2016-03-09T00:00:00Z"

    def test_frozen(self) -> None:
        instant = UtcInstant(datetime(2016, 3, 9, tzinfo=UTC))
        with pytest.raises(AttributeError):
            instant.value = datetime(2017, 1, 1)  # type: ignore[misc]
