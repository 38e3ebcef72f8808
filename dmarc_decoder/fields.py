import re
from datetime import timedelta
from typing import List, Type, TypeVar

from dmarc_decoder.errors import InvalidParameterValue, OutOfBounds
from dmarc_decoder.policy import AlignmentMode, FailureOption, Policy, ReportFormat

E = TypeVar("E", Policy, AlignmentMode, FailureOption, ReportFormat)

_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_enum(enum_cls: Type[E], value: str, tag: str) -> E:
    try:
        return enum_cls(value)
    except ValueError as err:
        raise InvalidParameterValue(tag) from err


def _parse_integer(value: str, tag: str) -> int:
    if not _DECIMAL_INTEGER.fullmatch(value):
        raise InvalidParameterValue(tag)
    try:
        return int(value)
    except ValueError as err:
        raise InvalidParameterValue(tag) from err


def parse_policy(value: str, tag: str) -> Policy:
    return _parse_enum(Policy, value, tag)


def parse_alignment_mode(value: str, tag: str) -> AlignmentMode:
    return _parse_enum(AlignmentMode, value, tag)


def parse_failure_options(value: str) -> List[FailureOption]:
    return [
        _parse_enum(FailureOption, token.strip(), "fo") for token in value.split(":")
    ]


def parse_report_formats(value: str) -> List[ReportFormat]:
    return [_parse_enum(ReportFormat, token, "rf") for token in value.split(":")]


def parse_percent(value: str) -> int:
    percent = _parse_integer(value, "pct")
    if not 0 <= percent <= 100:
        raise OutOfBounds("pct")
    return percent


def parse_report_interval(value: str) -> timedelta:
    seconds = _parse_integer(value, "ri")
    if seconds <= 0:
        raise OutOfBounds("ri")
    try:
        return timedelta(seconds=seconds)
    except OverflowError as err:
        raise OutOfBounds("ri") from err
