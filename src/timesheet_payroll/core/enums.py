from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Lifecycle status of an employee record (soft lifecycle only)."""

    ACTIVE = "active"
    NOT_REGISTERED = "not_registered"
    FIRED = "fired"


class PaymentType(str, Enum):
    HOURLY = "hourly"
    SALARY = "salary"


class PaymentMethod(str, Enum):
    """Payment channel: bank card or cash payroll sheet (ведомость)."""

    CARD = "card"
    CASH = "cash"


class WorkSchedule(str, Enum):
    """Work-rotation codes as stored on employees and positions."""

    FIVE_TWO = "5/2"
    TWO_TWO = "2/2"
    THREE_THREE = "3/3"
    SIX_ONE = "6/1"
    ROTATION = "вахта (7/0)"


class DayType(str, Enum):
    """Kind of a timesheet day. Only WORK days carry hours."""

    WORK = "work"
    SICK = "sick"
    VACATION = "vacation"
    ABSENCE = "absence"
    FIRED = "fired"


class AdditionalPaymentType(str, Enum):
    SICK_LEAVE = "sick_leave"
    VACATION = "vacation"
    BONUS = "bonus"
    OTHER = "other"


class RosterGroup(str, Enum):
    STAFF = "staff"
    PART_TIME = "part_time"


class ReportKind(str, Enum):
    """Payroll period a submitted report covers: аванс or final salary."""

    ADVANCE = "advance"
    SALARY = "salary"


class BudgetStatus(str, Enum):
    UNDER = "under"
    OVER = "over"
    ON_TRACK = "on_track"


class ReportStatus(str, Enum):
    """Approval workflow of a site's monthly report (manager submits, economist reviews)."""

    DRAFT = "draft"
    REQUESTED = "requested"
    SUBMITTED = "submitted"
    REJECTED = "rejected"
    APPROVED = "approved"
