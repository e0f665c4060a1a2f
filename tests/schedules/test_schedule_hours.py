import logging

import pytest

from timesheet_payroll.core.exceptions import InputError
from timesheet_payroll.employees.model import Position
from timesheet_payroll.schedules.factory import ScheduleStrategyFactory
from timesheet_payroll.schedules.service import ScheduleHoursCalculator
from timesheet_payroll.schedules.strategies.shift_strategy import AlternatingShiftStrategy
from timesheet_payroll.schedules.strategies.weekday_strategy import WeekdayStrategy


def test_five_two_counts_weekdays_of_february_2024():
    # 1 Feb 2024 is a Thursday: 21 weekdays in a 29-day month
    assert ScheduleHoursCalculator().planned_hours("5/2", 2024, 2) == 21 * 8


def test_five_two_february_2023_is_160_hours():
    assert ScheduleHoursCalculator().planned_hours("5/2", 2023, 2) == 160


def test_rotation_works_every_day():
    assert ScheduleHoursCalculator().planned_hours("вахта (7/0)", 2024, 4) == 240


@pytest.mark.parametrize("code", ["2/2", "3/3"])
def test_alternating_shifts_are_half_the_days_at_12_hours(code):
    calc = ScheduleHoursCalculator()
    assert calc.planned_hours(code, 2024, 1) == 15 * 12
    assert calc.planned_hours(code, 2024, 2) == 14 * 12


def test_six_one_is_six_sevenths_of_the_days():
    calc = ScheduleHoursCalculator()
    # 31 * 6 // 7 == 26
    assert calc.planned_hours("6/1", 2024, 3) == 26 * 8
    # 28 * 6 // 7 == 24
    assert calc.planned_hours("6/1", 2023, 2) == 24 * 8


def test_unknown_code_falls_back_to_five_two(caplog):
    calc = ScheduleHoursCalculator()
    with caplog.at_level(logging.WARNING):
        hours = calc.planned_hours("4/4", 2024, 2)

    assert hours == calc.planned_hours("5/2", 2024, 2)
    assert "4/4" in caplog.text


def test_bare_rotation_code_is_not_recognized():
    factory = ScheduleStrategyFactory()
    assert isinstance(factory.for_code("вахта"), WeekdayStrategy)
    assert isinstance(factory.for_code(" 2/2 "), AlternatingShiftStrategy)


@pytest.mark.parametrize("code,shift", [("5/2", 8), ("2/2", 12), ("3/3", 12), ("6/1", 8), ("вахта (7/0)", 8), (None, 8)])
def test_planned_hours_are_non_negative_multiples_of_shift(code, shift):
    calc = ScheduleHoursCalculator()
    for year in (2023, 2024):
        for month in range(1, 13):
            hours = calc.planned_hours(code, year, month)
            assert hours >= 0
            assert hours % shift == 0


def test_invalid_month_number_raises():
    with pytest.raises(InputError):
        ScheduleHoursCalculator().planned_hours("5/2", 2024, 13)


def test_staffing_norm_hours_uses_hours_per_shift_and_headcount():
    positions = [
        Position(position_id="p1", object_id="s1", title="Охранник", work_schedule="2/2", hours_per_shift=12, positions_count=2),
        Position(position_id="p2", object_id="s1", title="Уборщик", work_schedule="5/2", positions_count=1),
        Position(position_id="p3", object_id="s1", title="Архив", work_schedule="5/2", positions_count=5, is_active=False),
    ]

    # April 2024: 15 shift days, 22 weekdays
    assert ScheduleHoursCalculator().staffing_norm_hours(positions, 2024, 4) == 15 * 12 * 2 + 22 * 8
