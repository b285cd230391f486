import logging
import re
from enum import Enum
from typing import Any

from confstore.errors.errors import CoercionError, InvariantViolation
from confstore.types.datatypes import DURATION, EnumType, NumericType, parse_integer
from confstore.types.duration import Duration, TimeUnit, parse_time_unit

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


def coerce_numeric(key: str, raw: Any, datatype: NumericType) -> Any:
    """
    Some stores hand back strings even for numeric settings, others keep the
    native number. Native values of the right kind pass through untouched.
    """
    kind = datatype.kind
    if kind.accepts(raw):
        return raw
    text = str(raw)
    try:
        return kind.from_string(text)
    except (ValueError, TypeError, ArithmeticError) as e:
        logger.error(f'Failed to parse configuration string "{text}" into type {kind}: {e}')
        raise CoercionError(
            f'cannot parse "{text}" as {kind} for key "{key}"',
            key=key,
            raw_value=text,
            target_type=datatype,
        ) from e


def coerce_enum(key: str, raw: Any, datatype: EnumType) -> Enum:
    if not datatype.labels:
        raise InvariantViolation(f"zero-length enum {datatype.enum_cls.__qualname__}", key=key)
    if isinstance(raw, datatype.enum_cls):
        return raw

    text = str(raw)
    for label, member in datatype.labels:
        if label == text:
            return member
    raise CoercionError(
        f'no match for string "{text}" in {datatype}',
        key=key,
        raw_value=text,
        target_type=datatype,
    )


def coerce_duration(key: str, raw: Any, default_unit: TimeUnit = TimeUnit.MILLISECONDS) -> Duration:
    if isinstance(raw, Duration):
        return raw

    text = str(raw)
    parts = _WHITESPACE.split(text)
    if len(parts) not in (1, 2) or not all(parts):
        raise CoercionError(
            f'cannot parse time duration from "{text}"',
            key=key,
            raw_value=text,
            target_type=DURATION,
        )
    try:
        magnitude = parse_integer(parts[0])
        unit = parse_time_unit(parts[1]) if len(parts) == 2 else default_unit
    except ValueError as e:
        raise CoercionError(
            f'cannot parse time duration from "{text}": {e}',
            key=key,
            raw_value=text,
            target_type=DURATION,
        ) from e
    return Duration(magnitude, unit)
