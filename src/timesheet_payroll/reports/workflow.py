from __future__ import annotations

import logging
from typing import Optional, Union

from ..common.validators import coerce_enum
from ..core.enums import ReportStatus
from ..core.exceptions import ValidationError
from .model import Report

logger = logging.getLogger(__name__)

StatusLike = Optional[Union[ReportStatus, str]]

# No status yet means the report was never started.
_SUBMITTABLE = {None, ReportStatus.DRAFT, ReportStatus.REQUESTED, ReportStatus.REJECTED}


def _status(value: StatusLike) -> Optional[ReportStatus]:
    if value is None:
        return None
    return coerce_enum(ReportStatus, value, "status")


class ReportWorkflowService:
    """Use case: move a monthly report through draft -> submitted -> approved/rejected."""

    def can_request(self, status: StatusLike) -> bool:
        return _status(status) in {None, ReportStatus.DRAFT, ReportStatus.REJECTED}

    def can_submit(self, status: StatusLike) -> bool:
        return _status(status) in _SUBMITTABLE

    def can_review(self, status: StatusLike) -> bool:
        return _status(status) == ReportStatus.SUBMITTED

    def request(self, status: StatusLike) -> ReportStatus:
        if not self.can_request(status):
            raise ValidationError(f"Report cannot be requested from status {status!r}")
        return ReportStatus.REQUESTED

    def submit(self, report: Report, status: StatusLike) -> ReportStatus:
        if not self.can_submit(status):
            raise ValidationError(f"Report cannot be submitted from status {status!r}")
        if not report.is_valid:
            names = ", ".join(r.name for r in report.invalid_rows)
            raise ValidationError(f"Report has employees below the norm: {names}")
        logger.info("Report submitted for site %s, %s", report.site_id, report.period,
                    extra={"site_id": report.site_id, "period": report.period})
        return ReportStatus.SUBMITTED

    def approve(self, status: StatusLike) -> ReportStatus:
        if not self.can_review(status):
            raise ValidationError(f"Report cannot be approved from status {status!r}")
        return ReportStatus.APPROVED

    def reject(self, status: StatusLike, comment: str) -> ReportStatus:
        if not self.can_review(status):
            raise ValidationError(f"Report cannot be rejected from status {status!r}")
        if not comment or not comment.strip():
            raise ValidationError("A rejection needs a comment")
        return ReportStatus.REJECTED
