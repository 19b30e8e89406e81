# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""
The compiled form of a five-field cron expression.

    <minute> <hour> <day_of_month> <month> <day_of_week>

Each field compiles to one of two shapes. The asterisk compiles to `CronAll`, which
places no constraint on the field at all. Anything else compiles to a `CronBitset`: one
boolean per legal value of the field, where slot `i` stands for the value
`unit.min_value + i`. For a day-of-month field slot zero is the first of the month; for
a day-of-week field slot zero is Sunday.

`CronAll` and a `CronBitset` with every slot enabled match the same instants, but they
are not interchangeable. The wildcard formats back to "*" while the full bitset formats
as an explicit range (e.g. "0-59").
"""
from dataclasses import dataclass

from cron_predicate.cron.units import CronUnit


@dataclass(frozen=True)
class CronAll:
    """All values"""


@dataclass(frozen=True)
class CronBitset:
    """The enabled values of a field, indexed by offset from the field minimum"""

    enabled: tuple[bool, ...]

    def is_enabled(self, offset: int) -> bool:
        return self.enabled[offset]

    def offsets(self) -> frozenset[int]:
        return frozenset(i for i, flag in enumerate(self.enabled) if flag)


CronField = CronAll | CronBitset
"""A union type for the compiled value of a single field"""


@dataclass(frozen=True)
class CronFields:
    """The five compiled fields of an expression, in expression order"""

    minutes: CronField
    hours: CronField
    days_of_month: CronField
    months: CronField
    days_of_week: CronField

    def field(self, unit: CronUnit) -> CronField:
        match unit:
            case CronUnit.MINUTE:
                return self.minutes
            case CronUnit.HOUR:
                return self.hours
            case CronUnit.DAY_OF_MONTH:
                return self.days_of_month
            case CronUnit.MONTH:
                return self.months
            case CronUnit.DAY_OF_WEEK:
                return self.days_of_week

    def by_unit(self) -> tuple[tuple[CronUnit, CronField], ...]:
        return tuple((unit, self.field(unit)) for unit in CronUnit)
