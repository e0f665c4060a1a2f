import logging
from datetime import date

import pytest

from timesheet_payroll.common.collation import Collation
from timesheet_payroll.core.enums import EmployeeStatus, PaymentMethod, PaymentType
from timesheet_payroll.core.exceptions import ValidationError
from timesheet_payroll.employees.model import Employee, Position
from timesheet_payroll.employees.roster import RosterClassifier


def emp(employee_id, name, title="Охранник", status=EmployeeStatus.ACTIVE):
    return Employee(employee_id=employee_id, name=name, title=title, object_id="s1", status=status)


def names(employees):
    return [e.name for e in employees]


def test_manager_first_then_administrators_then_others():
    staff = [
        emp("1", "Яковлев Я."),
        emp("2", "Борисова Б.", title="Старший администратор"),
        emp("3", "Петров П.", title="Менеджер объекта"),
        emp("4", "Абрамов А."),
        emp("5", "Алиева А.", title="Администратор"),
    ]

    roster = RosterClassifier().classify(staff, manager_name="Петров П.")

    assert names(roster.staff) == ["Петров П.", "Алиева А.", "Борисова Б.", "Абрамов А.", "Яковлев Я."]


def test_manager_who_is_an_administrator_still_goes_first():
    staff = [emp("1", "Андреев"), emp("2", "Юдин", title="администратор")]

    roster = RosterClassifier().classify(staff, manager_name="Юдин")

    assert names(roster.staff) == ["Юдин", "Андреев"]


def test_unknown_manager_name_changes_nothing():
    staff = [emp("1", "Смирнов"), emp("2", "Иванов")]

    assert names(RosterClassifier().classify(staff, manager_name="Никто").staff) == ["Иванов", "Смирнов"]
    assert names(RosterClassifier().classify(staff).staff) == ["Иванов", "Смирнов"]


def test_yo_sorts_with_ye_not_before_the_alphabet():
    staff = [emp("1", "Жуков"), emp("2", "Ёлкин"), emp("3", "Егоров"), emp("4", "Абрамов")]

    assert names(RosterClassifier().classify(staff).staff) == ["Абрамов", "Егоров", "Ёлкин", "Жуков"]


def test_cyrillic_names_sort_before_latin_for_russian_locale():
    staff = [emp("1", "Smith"), emp("2", "Иванов")]

    assert names(RosterClassifier(Collation("ru_RU")).classify(staff).staff) == ["Иванов", "Smith"]
    assert names(RosterClassifier(Collation("en")).classify(staff).staff) == ["Smith", "Иванов"]


def test_administrator_keyword_is_configurable():
    staff = [emp("1", "Baker"), emp("2", "Young", title="Shift Administrator")]

    roster = RosterClassifier(Collation("en"), administrator_keyword="administrator").classify(staff)

    assert names(roster.staff) == ["Young", "Baker"]


def test_part_time_is_a_separate_group_and_fired_are_dropped():
    employees = [
        emp("1", "Сидоров"),
        emp("2", "Волкова", status=EmployeeStatus.NOT_REGISTERED),
        emp("3", "Антонов", status=EmployeeStatus.NOT_REGISTERED),
        emp("4", "Уволенный", status=EmployeeStatus.FIRED),
    ]

    roster = RosterClassifier().classify(employees)

    assert names(roster.staff) == ["Сидоров"]
    assert names(roster.part_time) == ["Антонов", "Волкова"]


def test_records_without_name_or_id_are_excluded_and_logged(caplog):
    employees = [emp("1", "Сидоров"), emp("2", None), emp(None, "Без Номера"), emp("3", "   ")]

    with caplog.at_level(logging.WARNING):
        roster = RosterClassifier().classify(employees)

    assert names(roster.staff) == ["Сидоров"]
    assert roster.excluded == ("2", "<no id: Без Номера>", "3")
    assert "without name or id" in caplog.text


def test_employee_from_dict_and_lifecycle():
    e = Employee.from_dict(
        {
            "id": 42,
            "name": " Кузнецова М. ",
            "position": "Кассир",
            "objectId": "s1",
            "status": "not_registered",
            "workSchedule": "2/2",
            "paymentType": "salary",
            "monthlySalary": "55000",
            "paymentMethod": "cash",
            "hireDate": "2024-01-10",
        }
    )

    assert e.employee_id == "42"
    assert e.name == "Кузнецова М."
    assert e.status == EmployeeStatus.NOT_REGISTERED
    assert e.payment_type == PaymentType.SALARY
    assert e.payment_method == PaymentMethod.CASH
    assert e.rate == 55000
    assert e.hire_date == date(2024, 1, 10)

    fired = e.fire(date(2024, 5, 31))
    assert fired.status == EmployeeStatus.FIRED
    assert fired.termination_date == date(2024, 5, 31)
    assert e.status == EmployeeStatus.NOT_REGISTERED


def test_employee_from_dict_defaults_and_errors():
    e = Employee.from_dict({"id": "1", "name": "Орлов", "position": "Охранник"}, default_payment_method=PaymentMethod.CASH)
    assert e.status == EmployeeStatus.ACTIVE
    assert e.work_schedule == "5/2"
    assert e.payment_method == PaymentMethod.CASH
    assert e.rate == 0

    with pytest.raises(ValidationError):
        Employee.from_dict({"id": "1", "name": "Орлов", "position": "Охранник", "status": "retired"})
    with pytest.raises(ValidationError):
        Employee.from_dict({"id": "1", "name": "Орлов", "position": "Охранник", "hourlyRate": -5})


def test_position_rejects_negative_headcount():
    with pytest.raises(ValidationError):
        Position(position_id="p", object_id="s1", title="Охранник", positions_count=-1)
