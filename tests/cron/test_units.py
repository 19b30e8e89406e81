# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest

from cron_predicate.cron.units import (
    CronUnit,
    month_abbrs,
    month_name_to_value,
    weekday_name_to_value,
)


def test_units_are_in_expression_order() -> None:
    assert list(CronUnit) == [
        CronUnit.MINUTE,
        CronUnit.HOUR,
        CronUnit.DAY_OF_MONTH,
        CronUnit.MONTH,
        CronUnit.DAY_OF_WEEK,
    ]


@pytest.mark.parametrize(
    "unit, min_value, max_value, length",
    [
        (CronUnit.MINUTE, 0, 59, 60),
        (CronUnit.HOUR, 0, 23, 24),
        (CronUnit.DAY_OF_MONTH, 1, 31, 31),
        (CronUnit.MONTH, 1, 12, 12),
        (CronUnit.DAY_OF_WEEK, 0, 6, 7),
    ],
)
def test_unit_bounds(
    unit: CronUnit, min_value: int, max_value: int, length: int
) -> None:
    assert unit.min_value == min_value
    assert unit.max_value == max_value
    assert unit.length == length
    assert list(unit.values) == list(range(min_value, max_value + 1))


def test_only_months_and_weekdays_have_names() -> None:
    assert CronUnit.MONTH.names == month_name_to_value
    assert CronUnit.DAY_OF_WEEK.names == weekday_name_to_value
    for unit in (CronUnit.MINUTE, CronUnit.HOUR, CronUnit.DAY_OF_MONTH):
        assert not unit.names


def test_month_names_are_one_indexed() -> None:
    assert month_name_to_value["JAN"] == 1
    assert month_name_to_value["DEC"] == 12
    assert len(month_abbrs) == 12


def test_name_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        month_name_to_value["XYZ"] = 13  # type: ignore[index]
