# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Convert compiled fields back to the canonical text of a cron expression"""
from collections.abc import Iterator

from cron_predicate.cron.expression import CronAll, CronBitset, CronField, CronFields
from cron_predicate.cron.parser import (
    ALL_VALUES,
    LIST_CHARACTER,
    RANGE_CHARACTER,
)
from cron_predicate.cron.units import CronUnit


def _runs(enabled: tuple[bool, ...]) -> Iterator[tuple[int, int]]:
    # (first, last) offsets of each maximal run of enabled slots
    i = 0
    while i < len(enabled):
        if not enabled[i]:
            i += 1
            continue
        first = i
        while i < len(enabled) and enabled[i]:
            i += 1
        yield first, i - 1


def format_field_tokens(field: CronField, unit: CronUnit) -> Iterator[str]:
    match field:
        case CronAll():
            yield ALL_VALUES
        case CronBitset():
            for first, last in _runs(field.enabled):
                if first == last:
                    yield str(unit.min_value + first)
                else:
                    yield f"{unit.min_value + first}{RANGE_CHARACTER}{unit.min_value + last}"


def format_field(field: CronField, unit: CronUnit) -> str:
    return LIST_CHARACTER.join(format_field_tokens(field, unit))


def format_fields(fields: CronFields) -> str:
    return " ".join(format_field(field, unit) for unit, field in fields.by_unit())
