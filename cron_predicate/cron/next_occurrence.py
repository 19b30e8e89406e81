# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""Find the next instant that satisfies a compiled cron expression"""
from calendar import monthrange
from datetime import datetime, timedelta
from typing import Final

from dateutil.relativedelta import relativedelta

from cron_predicate.cron.expression import CronAll, CronBitset, CronField, CronFields
from cron_predicate.cron.units import CronUnit
from cron_predicate.observability.powertools_logging import (
    powertools_logger,
    should_log_events,
)

logger: Final = powertools_logger()

"""
single-pass behavior notes

    The next occurrence is found by advancing each field once, in expression order: minute,
hour, day-of-month, month, day-of-week. Each advance is the smallest forward step that
lands on an enabled value of that field, and it is applied before the next field looks at
the instant. No field is revisited, so a later advance can leave an earlier field
unsatisfied. For example, "0 0 31 * *" evaluated on the first of February finds no 31st
in February and leaves the day alone, and advancing the day-of-week can move the instant
off an enabled day-of-month.

    Day-of-month and day-of-week are both applied, so when both are restricted the result
must satisfy both rather than either one. This is a departure from standard cron
behavior, where a day that satisfies either field is accepted.
"""


def displacement(field: CronField, index: int, length: int) -> int:
    """
    The smallest `i` in `[0, length)` such that slot `(index + i) % length` of `field`
    is enabled. A wildcard, or a field with nothing enabled in the first `length`
    slots, is already satisfied and returns zero.
    """
    match field:
        case CronAll():
            return 0
        case CronBitset():
            for i in range(length):
                if field.is_enabled((index + i) % length):
                    return i
            return 0


def day_of_week(dt: datetime) -> int:
    """Day of week of `dt` with Sunday as zero"""
    return (dt.weekday() + 1) % 7


def truncate_to_minute(dt: datetime) -> datetime:
    return dt.replace(second=0, microsecond=0)


def next_occurrence(fields: CronFields, dt: datetime) -> datetime:
    """
    The first instant at or after `dt`, truncated to the minute, reached by advancing
    each field of `fields` to its next enabled value. The timezone of `dt`, if any, is
    carried through unchanged.
    """
    result = truncate_to_minute(dt)

    minutes: Final = displacement(fields.minutes, result.minute, 60)
    result += timedelta(minutes=minutes)

    hours: Final = displacement(fields.hours, result.hour, 24)
    result += timedelta(hours=hours)

    _, days_in_month = monthrange(result.year, result.month)
    days: Final = displacement(fields.days_of_month, result.day - 1, days_in_month)
    result += timedelta(days=days)

    # calendar months, clamped to the last day of a shorter target month
    months: Final = displacement(fields.months, result.month - 1, 12)
    result += relativedelta(months=months)

    weekdays: Final = displacement(fields.days_of_week, day_of_week(result), 7)
    result += timedelta(days=weekdays)

    if should_log_events(logger):
        logger.debug(
            "Resolved next occurrence",
            extra={
                "reference": dt.isoformat(),
                "displacement": {
                    "minutes": minutes,
                    "hours": hours,
                    "days_of_month": days,
                    "months": months,
                    "days_of_week": weekdays,
                },
                "next": result.isoformat(),
            },
        )

    return result


def field_contains(field: CronField, unit: CronUnit, value: int) -> bool:
    match field:
        case CronAll():
            return True
        case CronBitset():
            return field.is_enabled(value - unit.min_value)


def fields_contain(fields: CronFields, dt: datetime) -> bool:
    """Does `dt` satisfy every field of `fields`"""
    return all(
        (
            field_contains(fields.minutes, CronUnit.MINUTE, dt.minute),
            field_contains(fields.hours, CronUnit.HOUR, dt.hour),
            field_contains(fields.days_of_month, CronUnit.DAY_OF_MONTH, dt.day),
            field_contains(fields.months, CronUnit.MONTH, dt.month),
            field_contains(fields.days_of_week, CronUnit.DAY_OF_WEEK, day_of_week(dt)),
        )
    )
