"""Playlist checks against rfc8216.

Only a subset of the rules is enforced; tags without a rule pass. All
violations are collected, in playlist order, instead of stopping at the
first one.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Iterator

from .tags import (
    ExtInf,
    ExtM3U,
    ExtXBitrate,
    ExtXDateRange,
    ExtXKey,
    ExtXMap,
    ExtXPreloadHint,
    ExtXProgramDateTime,
    ExtXRenditionReport,
    ExtXSkip,
    ExtXStart,
    ExtXTargetDuration,
    ExtXVersion,
    Tag,
)

_logger = logging.getLogger("m3u8tags")

MIN_VERSION = 1
MAX_VERSION = 7
KEY_METHODS = ("NONE", "AES-128", "SAMPLE-AES")


class ValidationError:
    """A rule violation. These are values; they are returned, not raised."""

    message: ClassVar[str] = ""

    def __str__(self) -> str:
        return self.message.format(self=self)


@dataclass(frozen=True)
class MissingExtM3U(ValidationError):
    message = "Playlist does not start with #EXTM3U"


@dataclass(frozen=True)
class InvalidVersion(ValidationError):
    message = "Invalid version: {self.version}"
    version: int


@dataclass(frozen=True)
class InvalidDuration(ValidationError):
    message = "Invalid segment duration: {self.duration}"
    duration: float


@dataclass(frozen=True)
class InvalidTargetDuration(ValidationError):
    message = "Invalid target duration: {self.duration}"
    duration: int


@dataclass(frozen=True)
class InvalidKeyMethod(ValidationError):
    message = "Invalid key method: {self.method}"
    method: str


@dataclass(frozen=True)
class InvalidMapUri(ValidationError):
    message = "Missing map URI"


@dataclass(frozen=True)
class InvalidProgramDateTime(ValidationError):
    message = "Missing program date-time"


@dataclass(frozen=True)
class InvalidDateRangeId(ValidationError):
    message = "Missing date range ID"


@dataclass(frozen=True)
class InvalidDateRangeStartDate(ValidationError):
    message = "Missing date range start date"


@dataclass(frozen=True)
class InvalidDateRangeDuration(ValidationError):
    message = "Invalid date range duration: {self.duration}"
    duration: float


@dataclass(frozen=True)
class InvalidDateRangePlannedDuration(ValidationError):
    message = "Invalid date range planned duration: {self.duration}"
    duration: float


@dataclass(frozen=True)
class InvalidBitrate(ValidationError):
    message = "Invalid bitrate: {self.bitrate}"
    bitrate: int


@dataclass(frozen=True)
class InvalidStartOffset(ValidationError):
    message = "Missing start time offset"


@dataclass(frozen=True)
class InvalidSkipDuration(ValidationError):
    message = "Invalid skip duration: {self.duration}"
    duration: float


@dataclass(frozen=True)
class InvalidPreloadHintUri(ValidationError):
    message = "Missing preload hint URI"


@dataclass(frozen=True)
class InvalidRenditionReportUri(ValidationError):
    message = "Missing rendition report URI"


def _version(tag: ExtXVersion) -> Iterator[ValidationError]:
    if not MIN_VERSION <= tag.number <= MAX_VERSION:
        yield InvalidVersion(tag.number)


def _extinf(tag: ExtInf) -> Iterator[ValidationError]:
    if tag.duration <= 0:
        yield InvalidDuration(tag.duration)


def _target_duration(tag: ExtXTargetDuration) -> Iterator[ValidationError]:
    if tag.duration == 0:
        yield InvalidTargetDuration(tag.duration)


def _key(tag: ExtXKey) -> Iterator[ValidationError]:
    if tag.method not in KEY_METHODS:
        yield InvalidKeyMethod(tag.method)


def _date_range(tag: ExtXDateRange) -> Iterator[ValidationError]:
    if not tag.id:
        yield InvalidDateRangeId()
    if not tag.start_date:
        yield InvalidDateRangeStartDate()
    if tag.duration is not None and tag.duration < 0:
        yield InvalidDateRangeDuration(tag.duration)
    if tag.planned_duration is not None and tag.planned_duration < 0:
        yield InvalidDateRangePlannedDuration(tag.planned_duration)


def _bitrate(tag: ExtXBitrate) -> Iterator[ValidationError]:
    if tag.bitrate < 0:
        yield InvalidBitrate(tag.bitrate)


def _skip(tag: ExtXSkip) -> Iterator[ValidationError]:
    if tag.duration is not None and tag.duration <= 0:
        yield InvalidSkipDuration(tag.duration)


def _required(field: str, error: ValidationError) -> Callable[[Any], Iterator]:
    def _check(tag: Any) -> Iterator[ValidationError]:
        if not getattr(tag, field):
            yield error

    return _check


_RULES: dict[type[Tag], Callable[[Any], Iterator[ValidationError]]] = {
    ExtXVersion: _version,
    ExtInf: _extinf,
    ExtXTargetDuration: _target_duration,
    ExtXKey: _key,
    ExtXMap: _required("uri", InvalidMapUri()),
    ExtXProgramDateTime: _required("date_time", InvalidProgramDateTime()),
    ExtXDateRange: _date_range,
    ExtXBitrate: _bitrate,
    ExtXStart: _required("time_offset", InvalidStartOffset()),
    ExtXSkip: _skip,
    ExtXPreloadHint: _required("uri", InvalidPreloadHintUri()),
    ExtXRenditionReport: _required("uri", InvalidRenditionReportUri()),
}


def validate(tags: Iterable[Tag]) -> list[ValidationError]:
    """Return every violation in ``tags``; an empty list means valid.

    ``tags`` is a ``Playlist`` or any iterable of tags. Nothing is mutated.
    """
    tags = list(tags)
    errors: list[ValidationError] = []
    if not tags or not isinstance(tags[0], ExtM3U):
        errors.append(MissingExtM3U())
    for tag in tags:
        if rule := _RULES.get(type(tag)):
            errors.extend(rule(tag))
    _logger.debug("Validated %d tag(s), %d error(s)", len(tags), len(errors))
    return errors
