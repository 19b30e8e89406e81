# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from datetime import datetime
from typing import Final, Optional

from cron_predicate.cron.expression import CronAll, CronField, CronFields
from cron_predicate.cron.formatter import format_fields
from cron_predicate.cron.next_occurrence import fields_contain, next_occurrence
from cron_predicate.cron.parser import CronFormatError, parse_fields
from cron_predicate.cron.units import CronUnit
from cron_predicate.observability.powertools_logging import (
    powertools_logger,
    should_log_events,
)

logger: Final = powertools_logger()


@dataclass(frozen=True)
class CronExpression:
    """
    A compiled five-field cron expression.

    ┌───────────── minute (0 - 59)
    │ ┌───────────── hour (0 - 23)
    │ │ ┌───────────── day of the month (1 - 31)
    │ │ │ ┌───────────── month (1 - 12 or JAN - DEC)
    │ │ │ │ ┌───────────── day of the week (0 - 6 or SUN - SAT, Sunday is 0)
    * * * * *

    Instances are only created by parsing and are immutable, so they can be shared
    freely. Two expressions are equal when their compiled fields are equal, regardless
    of how they were written.
    """

    fields: CronFields

    @classmethod
    def parse(cls, expr: str) -> "CronExpression":
        result: Final = _parse_expression(expr)
        if isinstance(result, CronFormatError):
            raise result
        return result

    @classmethod
    def try_parse(cls, expr: str) -> tuple[bool, Optional["CronExpression"]]:
        result: Final = _parse_expression(expr)
        if isinstance(result, CronFormatError):
            if should_log_events(logger):
                logger.debug(
                    "Rejected cron expression",
                    extra={"expr": expr, "error": str(result)},
                )
            return False, None
        return True, result

    def next(self, dt: datetime) -> datetime:
        return next_occurrence(self.fields, dt)

    def contains(self, dt: datetime) -> bool:
        """Does `dt`, truncated to the minute, satisfy every field"""
        return fields_contain(self.fields, dt)

    def field(self, unit: CronUnit) -> CronField:
        return self.fields.field(unit)

    def is_wildcard(self, unit: CronUnit) -> bool:
        return isinstance(self.field(unit), CronAll)

    def enabled_values(self, unit: CronUnit) -> frozenset[int]:
        """The calendar values allowed by a field, all values of the unit for a wildcard"""
        field: Final = self.field(unit)
        if isinstance(field, CronAll):
            return frozenset(unit.values)
        return frozenset(unit.min_value + offset for offset in field.offsets())

    @property
    def minutes(self) -> CronField:
        return self.fields.minutes

    @property
    def hours(self) -> CronField:
        return self.fields.hours

    @property
    def days_of_month(self) -> CronField:
        return self.fields.days_of_month

    @property
    def months(self) -> CronField:
        return self.fields.months

    @property
    def days_of_week(self) -> CronField:
        return self.fields.days_of_week

    def __str__(self) -> str:
        return format_fields(self.fields)


def _parse_expression(expr: str) -> CronExpression | CronFormatError:
    if expr is None:
        raise TypeError("Cron expression must be a string, received None")

    try:
        fields: Final = parse_fields(expr)
    except CronFormatError as err:
        return err

    result: Final = CronExpression(fields=fields)
    if should_log_events(logger):
        logger.debug(
            "Compiled cron expression", extra={"expr": expr, "canonical": str(result)}
        )
    return result


def parse(expr: str) -> CronExpression:
    return CronExpression.parse(expr)


def try_parse(expr: str) -> tuple[bool, Optional[CronExpression]]:
    return CronExpression.try_parse(expr)
