"""Built-in ISO-8601 time codec on top of :mod:`datetime`.

Used when a descriptor declares ``timestamp=True``. Any other object
exposing ``utc(text)`` returning values with ``format()`` can be passed
instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class UtcInstant:
    """An aware UTC datetime that formats as ``YYYY-MM-DDTHH:MM:SSZ``."""

    value: datetime

    def format(self) -> str:
        """Render as ISO 8601 with a ``Z`` suffix.

        Microseconds are included only when non-zero. Naive values are
        taken as UTC.
        """
        value = self.value if self.value.tzinfo else self.value.replace(tzinfo=UTC)
        timespec = "microseconds" if value.microsecond else "seconds"
        text = value.astimezone(UTC).isoformat(timespec=timespec)
        return text.removesuffix("+00:00") + "Z"


class IsoTimeCodec:
    """Parse ISO-8601 strings into :class:`UtcInstant` values.

    Naive inputs are taken to be UTC already; offset inputs are converted.

    Examples:
        >>> IsoTimeCodec().utc("2016-03-09T08:00:00-04:00").format()
        '2016-03-09T12:00:00Z'
    """

    def utc(self, text: str) -> UtcInstant:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return UtcInstant(parsed.astimezone(UTC))
