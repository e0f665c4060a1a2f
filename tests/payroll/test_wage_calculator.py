import pytest

from timesheet_payroll.core.enums import PaymentType
from timesheet_payroll.payroll.calculator.hourly_calculator import HourlyPayrollCalculator
from timesheet_payroll.payroll.calculator.salary_calculator import SalaryPayrollCalculator
from timesheet_payroll.payroll.service import WageCalculator


def test_hourly_wage_is_rate_times_hours():
    calc = WageCalculator()
    assert calc.wage("hourly", 150, 160, hourly_rate=300) == 45000


def test_hourly_wage_rounds_half_up():
    calc = WageCalculator()
    assert calc.wage(PaymentType.HOURLY, 7.5, 160, hourly_rate=25) == 188
    assert calc.wage(PaymentType.HOURLY, 0.5, 160, hourly_rate=1) == 1


def test_salary_paid_in_full_when_norm_is_met():
    calc = WageCalculator()
    assert calc.wage("salary", 160, 160, monthly_salary=60000) == 60000
    assert calc.wage("salary", 200, 160, monthly_salary=60000) == 60000


def test_salary_reduced_pro_rata_for_underwork():
    calc = WageCalculator()
    assert calc.wage("salary", 80, 160, monthly_salary=60000) == 30000
    # 50000 / 168 * 100 = 29761.9
    assert calc.wage("salary", 100, 168, monthly_salary=50000) == 29762


def test_missing_rate_or_unknown_type_pays_nothing():
    calc = WageCalculator()
    assert calc.wage("salary", 100, 160, hourly_rate=300) == 0
    assert calc.wage("hourly", 100, 160, monthly_salary=60000) == 0
    assert calc.wage("piecework", 100, 160, hourly_rate=300, monthly_salary=60000) == 0
    assert calc.wage(None, 100, 160, hourly_rate=300) == 0


def test_salary_with_zero_planned_hours_does_not_divide():
    calc = SalaryPayrollCalculator()
    assert calc.actual_wage(rate=60000, actual_hours=0, planned_hours=0) == 60000
    assert calc.actual_wage(rate=60000, actual_hours=-1, planned_hours=0) == 0


def test_planned_wage():
    calc = WageCalculator()
    assert calc.planned_wage("salary", 160, monthly_salary=60000) == 60000
    assert calc.planned_wage("hourly", 160, hourly_rate=300) == 48000
    assert calc.planned_wage("hourly", 160) == 0
    assert HourlyPayrollCalculator().planned_wage(rate=250, planned_hours=168) == 42000


def test_split_all_in_advance():
    split = WageCalculator().split(45000, 150, 150)
    assert (split.total, split.advance, split.main) == (45000, 45000, 0)


def test_split_even_halves():
    split = WageCalculator().split(30000, 40, 80)
    assert (split.advance, split.main) == (15000, 15000)


def test_split_with_no_hours_is_all_main():
    split = WageCalculator().split(0, 0, 0)
    assert (split.total, split.advance, split.main) == (0, 0, 0)


@pytest.mark.parametrize("wage", [0, 1, 7, 99, 10001, 33333, 59999])
def test_split_parts_add_up_exactly(wage):
    calc = WageCalculator()
    for actual in (1, 3, 7, 11, 150):
        for advance in range(0, actual + 1, max(1, actual // 5)):
            split = calc.split(wage, advance, actual)
            assert split.advance + split.main == wage
