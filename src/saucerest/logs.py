"""Cleaning up real device logs.

The Appium and device logs of a real device job are served as one JSON array which, besides the log entries, holds
noise: strings, numbers, nested arrays and objects that lack some of the entry fields. The array is read as a stream so
large logs are never held in memory, and only complete entries are kept.
"""

import logging
import re
from decimal import Decimal
from typing import Any, Iterable, Iterator, Optional, TextIO

import ijson
from pydantic import BaseModel, field_validator

from .errors import LogFormatError, MissingResponseError

logger = logging.getLogger(__name__)

APPIUM_VERSION_PATTERN = re.compile(r"Appium v(\d+\.\d+\.\d+)")


class LogEntry(BaseModel):
    time: Optional[str] = None
    level: Optional[str] = None
    message: Optional[str] = None

    # Epoch timestamps and numeric levels are written as they appear in the log
    @field_validator("time", "level", "message", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return str(value)
        return value

    def is_well_formed(self) -> bool:
        return self.time is not None and self.level is not None and self.message is not None

    def __str__(self) -> str:
        return f"{self.time} {self.level} {self.message}"


def _parse_events(chunks: Iterable[bytes]) -> Iterator[tuple]:
    events = ijson.sendable_list()
    parser = ijson.parse_coro(events)
    received = False

    for chunk in chunks:
        if not chunk:
            continue
        received = True
        parser.send(chunk)
        yield from events
        del events[:]

    if not received:
        raise MissingResponseError("Response body is empty")

    parser.close()
    yield from events


def iter_log_entries(chunks: Iterable[bytes]) -> Iterator[LogEntry]:
    """
    Yields the complete entries of a JSON array log, in the order they appear.

    Array elements that are not objects are skipped. Objects missing a time, level or message are dropped. Numeric
    fields are kept as text. An object that cannot be decoded at all (broken JSON, or an object, array or boolean
    where text is expected) ends the parse with the error raised by ijson or pydantic, since the rest of the stream
    cannot be trusted.

    :param chunks: The raw bytes of the log, e.g. httpx.Response.iter_bytes().
    """
    events = _parse_events(chunks)

    _, event, _ = next(events, (None, None, None))
    if event != "start_array":
        raise LogFormatError(f"Expected a JSON array of log entries, got {event}")

    builder = None
    depth = 0
    for prefix, event, value in events:
        if builder is not None:
            builder.event(event, value)
            if event in ("start_map", "start_array"):
                depth += 1
            elif event in ("end_map", "end_array"):
                depth -= 1
            if depth == 0:
                entry = LogEntry.model_validate(builder.value)
                builder = None
                if entry.is_well_formed():
                    yield entry
        elif prefix == "item" and event == "start_map":
            builder = ijson.ObjectBuilder()
            builder.event(event, value)
            depth = 1
        # anything else inside the array is noise


def reconstruct(chunks: Iterable[bytes], sink: TextIO) -> None:
    """
    Writes one line per complete log entry to sink, formatted as "<time> <level> <message>".

    Lines are written as soon as their entry is parsed: when decoding fails partway, the lines of the entries before
    the failure are already in sink.
    """
    for entry in iter_log_entries(chunks):
        sink.write(f"{entry}\n")


def extract_appium_version(entries: Iterable[LogEntry]) -> Optional[str]:
    for entry in entries:
        match = APPIUM_VERSION_PATTERN.search(str(entry))
        if match:
            return match.group(1)
    return None
