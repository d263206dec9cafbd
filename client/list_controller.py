"""Employee collection state + create/update/delete orchestration.

The collection is a snapshot: every successful mutation is followed by a
full ``refresh()`` that replaces it, so it is never patched in place.
Transport failures are logged and leave the last good snapshot untouched.
"""
from enum import Enum
from typing import Callable, Optional

import httpx

from client.api_client import EmployeeAPI
from client.form_controller import FormController
from client.models import EmployeePayload, EmployeeRecord
from logger_config import setup_logger

logger = setup_logger("client.list")

DELETE_PROMPT = "Are you sure to delete this record?"


class MutationState(str, Enum):
    """Idle -> Pending -> Refreshing -> Idle on success; Pending -> Failed on error.

    A failed refresh also lands in Failed. Failed holds until the next
    mutation starts or a refresh succeeds; ``last_error`` says why.
    """

    IDLE = "idle"
    PENDING = "pending"
    REFRESHING = "refreshing"
    FAILED = "failed"


class ListController:
    def __init__(self, api: EmployeeAPI, form: Optional[FormController] = None):
        self.api = api
        self.form = form or FormController()
        self.employees: list[EmployeeRecord] = []
        self.record_for_edit: Optional[EmployeeRecord] = None
        self.state = MutationState.IDLE
        self.last_error: Optional[str] = None

    def _fail(self, action: str, exc: httpx.HTTPError) -> bool:
        self.last_error = f"{action} failed: {exc}"
        logger.error(self.last_error)
        self.state = MutationState.FAILED
        return False

    def refresh(self) -> bool:
        try:
            employees = self.api.fetch_all()
        except httpx.HTTPError as e:
            return self._fail("Refresh", e)
        self.employees = employees
        self.last_error = None
        if self.state is MutationState.FAILED:
            self.state = MutationState.IDLE
        return True

    def _after_mutation(self) -> bool:
        self.state = MutationState.REFRESHING
        if not self.refresh():
            return False
        self.state = MutationState.IDLE
        return True

    def add_or_edit(self, payload: EmployeePayload, on_success: Callable[[], None]) -> bool:
        """Create when ``employeeID`` is "0", otherwise update that id."""
        self.state = MutationState.PENDING
        try:
            if payload.employee_id == "0":
                self.api.create(payload)
            else:
                self.api.update(int(payload.employee_id), payload)
        except httpx.HTTPError as e:
            return self._fail(f"Saving employee {payload.employee_id}", e)
        on_success()
        self.record_for_edit = None
        return self._after_mutation()

    def select_for_edit(self, record: EmployeeRecord) -> None:
        self.record_for_edit = record
        self.form.set_from_external(record)

    def delete_record(self, employee_id: int, confirm: Callable[[str], bool]) -> bool:
        """Delete after ``confirm(DELETE_PROMPT)`` returns True; declining is a no-op."""
        if not confirm(DELETE_PROMPT):
            return False
        self.state = MutationState.PENDING
        try:
            self.api.delete(employee_id)
        except httpx.HTTPError as e:
            return self._fail(f"Delete of employee {employee_id}", e)
        return self._after_mutation()
