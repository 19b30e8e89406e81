# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
"""The five fields of a cron expression and the values each one accepts"""
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

# names are matched after upper-casing the input
month_abbrs: Final = (
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
)
# months are one-indexed
month_name_to_value: Final[Mapping[str, int]] = MappingProxyType(
    {name: i + 1 for i, name in enumerate(month_abbrs)}
)

# Sunday is zero, unlike the Python `calendar` package where Monday is zero
weekday_abbrs: Final = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
weekday_name_to_value: Final[Mapping[str, int]] = MappingProxyType(
    {name: i for i, name in enumerate(weekday_abbrs)}
)

_no_names: Final[Mapping[str, int]] = MappingProxyType({})


class CronUnit(Enum):
    """A cron field, in the order fields appear in an expression"""

    MINUTE = ("minute", 0, 60, _no_names)
    HOUR = ("hour", 0, 24, _no_names)
    DAY_OF_MONTH = ("day-of-month", 1, 31, _no_names)
    MONTH = ("month", 1, 12, month_name_to_value)
    DAY_OF_WEEK = ("day-of-week", 0, 7, weekday_name_to_value)

    def __init__(
        self, label: str, min_value: int, length: int, names: Mapping[str, int]
    ) -> None:
        self.label = label
        self.min_value = min_value
        self.length = length
        self.names = names

    @property
    def max_value(self) -> int:
        return self.min_value + self.length - 1

    @property
    def values(self) -> range:
        return range(self.min_value, self.min_value + self.length)
