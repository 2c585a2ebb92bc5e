from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import LeaveType, RequestStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def list_leaves(self, employee_id: str) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_employee(employee_id)

    def submit_leave(
        self,
        *,
        employee_id: str,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        reason: str,
        today: Optional[date] = None,
    ) -> LeaveRequest:
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        try:
            leave_type = LeaveType(leave_type)
        except ValueError:
            raise ValidationError(f"Unknown leave type: {leave_type!r}")

        request = LeaveRequest(
            request_id=str(uuid.uuid4()),
            employee_id=employee_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=require_non_empty(reason, "Reason"),
            status=RequestStatus.PENDING,
            request_date=today or now_local().date(),
        )
        self._leaves.save_all(employee_id, [*self._leaves.list_for_employee(employee_id), request])
        logger.info("Leave %s submitted by %s (%s..%s)", request.request_id, employee_id, start_date, end_date)
        return request

    def _decide(self, *, employee_id: str, request_id: str, status: RequestStatus, decided_by: Optional[str]) -> LeaveRequest:
        leaves = list(self._leaves.list_for_employee(employee_id))
        for i, req in enumerate(leaves):
            if req.request_id != request_id:
                continue
            if req.status != RequestStatus.PENDING:
                raise ValidationError("Leave request has already been decided")
            leaves[i] = replace(req, status=status, approved_by=decided_by)
            self._leaves.save_all(employee_id, leaves)
            logger.info("Leave %s of %s %s by %s", request_id, employee_id, status.value, decided_by)
            return leaves[i]
        raise NotFoundError("Leave request not found")

    def approve_leave(self, *, employee_id: str, request_id: str, decided_by: Optional[str] = None) -> LeaveRequest:
        return self._decide(employee_id=employee_id, request_id=request_id, status=RequestStatus.APPROVED, decided_by=decided_by)

    def reject_leave(self, *, employee_id: str, request_id: str, decided_by: Optional[str] = None) -> LeaveRequest:
        return self._decide(employee_id=employee_id, request_id=request_id, status=RequestStatus.REJECTED, decided_by=decided_by)

    def delete_leave(self, *, employee_id: str, request_id: str) -> None:
        leaves = self._leaves.list_for_employee(employee_id)
        remaining = [r for r in leaves if r.request_id != request_id]
        if len(remaining) == len(leaves):
            raise NotFoundError("Leave request not found")
        self._leaves.save_all(employee_id, remaining)
