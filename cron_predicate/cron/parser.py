# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
Compile the text of a cron expression to its bitset representation.

Parsing is strict about values and tolerant about layout. Every value must be a number
or a recognized name within the legal range of its field, but empty list items ("1,,2")
and whitespace tokens after the fifth field are ignored.
"""
import re
from collections.abc import Mapping
from typing import Final, Optional

from cron_predicate.cron.expression import CronAll, CronBitset, CronField, CronFields
from cron_predicate.cron.units import CronUnit

FIELD_COUNT: Final = 5

LIST_CHARACTER: Final = ","
RANGE_CHARACTER: Final = "-"
ALL_VALUES: Final = "*"


class CronFormatError(ValueError):
    """Raised for any cron expression, field, or value that cannot be compiled"""


def parse_fields(expr: str) -> CronFields:
    tokens: Final = expr.split()
    if len(tokens) < FIELD_COUNT:
        raise CronFormatError(
            f"Expression must contain {FIELD_COUNT} fields, found {len(tokens)}: {expr!r}"
        )

    # fields are parsed in order and the first failure aborts the rest
    fields: Final = [
        parse_unit_field(token, unit) for token, unit in zip(tokens, CronUnit)
    ]
    return CronFields(*fields)


def parse_unit_field(expr: str, unit: CronUnit) -> CronField:
    try:
        return parse_field(expr, unit.min_value, unit.length, unit.names)
    except CronFormatError as err:
        raise CronFormatError(f"Invalid {unit.label} field {expr!r}: {err}") from err


def parse_field(
    expr: str,
    min_value: int,
    length: int,
    names: Optional[Mapping[str, int]] = None,
) -> CronField:
    """
    Parse one field to a wildcard or a bitset of `length` slots, where slot `i` is the
    value `min_value + i`. Legal values are `min_value` to `min_value + length - 1`
    inclusive. `names` maps upper-case names to values for fields that accept them.
    """
    if expr == ALL_VALUES:
        return CronAll()

    parts: Final = [part for part in expr.split(LIST_CHARACTER) if part]
    if not parts:
        raise CronFormatError("Field must contain a value")

    enabled: Final = [False] * length
    for part in parts:
        start, end = _parse_range(part, min_value, min_value + length, names)
        for value in range(start, end + 1):
            enabled[value - min_value] = True

    # a reversed range such as "17-9" enables nothing on its own
    if not any(enabled):
        raise CronFormatError(f"Field {expr!r} does not enable any value")

    return CronBitset(enabled=tuple(enabled))


def _parse_range(
    expr: str,
    min_value: int,
    stop_value: int,
    names: Optional[Mapping[str, int]],
) -> tuple[int, int]:
    # a range splits on the first separator only, so "1-2-3" ends in the value "2-3"
    bounds: Final = [
        bound for bound in expr.split(RANGE_CHARACTER, maxsplit=1) if bound
    ]
    if not bounds:
        raise CronFormatError(f"Value {expr!r} is not valid")

    start: Final = _parse_value(bounds[0], names)
    end: Final = _parse_value(bounds[1], names) if len(bounds) > 1 else start

    for value in (start, end):
        if value < min_value:
            raise CronFormatError(f"Value {value} out of range (< {min_value})")
        if value >= stop_value:
            raise CronFormatError(f"Value {value} out of range (> {stop_value - 1})")

    return start, end


_numeric_value_re: Final = re.compile(r"[0-9]+")


def _parse_value(expr: str, names: Optional[Mapping[str, int]]) -> int:
    if _numeric_value_re.fullmatch(expr):
        return int(expr)

    if names and (value := names.get(expr.upper())) is not None:
        return value

    raise CronFormatError(f"Value {expr!r} is not a number or a constant")
