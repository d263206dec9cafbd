"""ListController tests — the controller drives the real app in-process.

``employee_api`` points EmployeeAPI at FastAPI's TestClient, so every
create/update/delete goes through the actual endpoints and SQLite file.
"""

import io
from unittest.mock import MagicMock

import pytest

from client.form_controller import FormController
from client.list_controller import DELETE_PROMPT, ListController, MutationState
from client.models import EmployeePayload, EmployeeRecord, ImageFile


def _server_list(client):
    return client.get("/api/employee/").json()


def _payload(employee_id="0", name="Alice", occupation="Engineer", with_image=True):
    image = ImageFile(filename="alice.png", content=b"png-bytes", content_type="image/png") if with_image else None
    return EmployeePayload(
        employee_id=employee_id, employee_name=name, occupation=occupation, image_name="", image_file=image
    )


@pytest.fixture
def ctrl(employee_api, fresh_db):
    return ListController(employee_api, FormController())


# =====================================================================
# refresh
# =====================================================================

@pytest.mark.client
class TestRefresh:
    def test_empty_store(self, ctrl):
        assert ctrl.refresh() is True
        assert ctrl.employees == []

    def test_replaces_collection_wholesale(self, ctrl, client):
        ctrl.employees = [EmployeeRecord(employee_id=999, employee_name="Stale")]
        client.post("/api/employee/", data={"employeeName": "Fresh", "occupation": ""})
        ctrl.refresh()
        assert [e.employee_name for e in ctrl.employees] == ["Fresh"]

    def test_transport_error_keeps_last_good(self, broken_api):
        ctrl = ListController(broken_api)
        snapshot = [EmployeeRecord(employee_id=1, employee_name="Kept")]
        ctrl.employees = snapshot
        assert ctrl.refresh() is False
        assert ctrl.employees is snapshot
        assert "Refresh failed" in ctrl.last_error


# =====================================================================
# add_or_edit
# =====================================================================

@pytest.mark.client
class TestAddOrEdit:
    def test_id_zero_creates(self, ctrl, client):
        on_success = MagicMock()
        assert ctrl.add_or_edit(_payload(), on_success) is True
        on_success.assert_called_once()

        rows = _server_list(client)
        assert [(r["employeeName"], r["occupation"]) for r in rows] == [("Alice", "Engineer")]
        assert ctrl.state is MutationState.IDLE

    def test_collection_matches_server_after_create(self, ctrl, client):
        ctrl.add_or_edit(_payload(name="Alice"), lambda: None)
        ctrl.add_or_edit(_payload(name="Bob"), lambda: None)
        expected = [EmployeeRecord.model_validate(r) for r in _server_list(client)]
        assert ctrl.employees == expected

    def test_nonzero_id_updates_that_id(self, ctrl, client):
        ctrl.add_or_edit(_payload(name="Alice"), lambda: None)
        emp_id = ctrl.employees[0].employee_id

        ctrl.add_or_edit(_payload(employee_id=str(emp_id), name="Alice", occupation="CTO", with_image=False),
                         lambda: None)

        rows = _server_list(client)
        assert len(rows) == 1
        assert rows[0]["employeeID"] == emp_id
        assert rows[0]["occupation"] == "CTO"
        assert ctrl.employees[0].occupation == "CTO"

    def test_routing_uses_create_or_update(self, ctrl):
        api = MagicMock()
        api.fetch_all.return_value = []
        ctrl.api = api

        ctrl.add_or_edit(_payload(employee_id="0"), lambda: None)
        api.create.assert_called_once()
        api.update.assert_not_called()

        api.reset_mock()
        api.fetch_all.return_value = []
        payload = _payload(employee_id="7")
        ctrl.add_or_edit(payload, lambda: None)
        api.update.assert_called_once_with(7, payload)
        api.create.assert_not_called()

    def test_update_of_missing_id_is_logged_not_raised(self, ctrl, client):
        ctrl.add_or_edit(_payload(name="Alice"), lambda: None)
        before = list(ctrl.employees)
        on_success = MagicMock()

        assert ctrl.add_or_edit(_payload(employee_id="99999", with_image=False), on_success) is False
        on_success.assert_not_called()
        assert ctrl.employees == before
        assert "404" in ctrl.last_error

    def test_transport_error_leaves_collection(self, broken_api):
        ctrl = ListController(broken_api)
        on_success = MagicMock()
        assert ctrl.add_or_edit(_payload(), on_success) is False
        on_success.assert_not_called()
        assert ctrl.employees == []
        assert ctrl.state is MutationState.FAILED
        assert len(broken_api.calls) == 1  # no retry, no refresh

    def test_failed_state_clears_on_next_success(self, ctrl):
        assert ctrl.add_or_edit(_payload(employee_id="99999", with_image=False), lambda: None) is False
        assert ctrl.state is MutationState.FAILED

        assert ctrl.add_or_edit(_payload(), lambda: None) is True
        assert ctrl.state is MutationState.IDLE
        assert ctrl.last_error is None


# =====================================================================
# select_for_edit
# =====================================================================

@pytest.mark.client
def test_select_for_edit_loads_form(ctrl):
    record = EmployeeRecord(employee_id=7, employee_name="Bob", occupation="Chef", image_src="http://x/bob.png")
    ctrl.select_for_edit(record)
    assert ctrl.record_for_edit is record
    assert ctrl.form.values.employee_id == 7
    assert ctrl.form.values.employee_name == "Bob"


# =====================================================================
# delete_record
# =====================================================================

@pytest.mark.client
class TestDelete:
    def test_declined_is_noop(self, ctrl, client):
        ctrl.add_or_edit(_payload(), lambda: None)
        before = list(ctrl.employees)
        api = MagicMock(wraps=ctrl.api)
        ctrl.api = api
        confirm = MagicMock(return_value=False)

        assert ctrl.delete_record(before[0].employee_id, confirm) is False
        confirm.assert_called_once_with(DELETE_PROMPT)
        api.delete.assert_not_called()
        assert ctrl.employees == before
        assert len(_server_list(client)) == 1

    def test_confirmed_deletes_and_refreshes(self, ctrl, client):
        ctrl.add_or_edit(_payload(name="Alice"), lambda: None)
        ctrl.add_or_edit(_payload(name="Bob"), lambda: None)
        alice = ctrl.employees[0]

        assert ctrl.delete_record(alice.employee_id, lambda prompt: True) is True
        assert [e.employee_name for e in ctrl.employees] == ["Bob"]
        assert [r["employeeName"] for r in _server_list(client)] == ["Bob"]

    def test_delete_missing_id_logged_only(self, ctrl):
        ctrl.add_or_edit(_payload(), lambda: None)
        before = list(ctrl.employees)
        assert ctrl.delete_record(99999, lambda prompt: True) is False
        assert ctrl.employees == before
        assert ctrl.last_error


# =====================================================================
# Full form → list round trip
# =====================================================================

@pytest.mark.client
def test_form_submit_round_trip(ctrl, client):
    upload = io.BytesIO(b"\x89PNG fake")
    upload.name = "alice.png"
    ctrl.form.update_field("employeeName", "Alice")
    ctrl.form.update_field("occupation", "Engineer")
    ctrl.form.select_image(upload)

    assert ctrl.form.submit(ctrl.add_or_edit) is True

    assert ctrl.form.values == EmployeeRecord()  # add_or_edit invoked the reset callback
    [alice] = ctrl.employees
    assert (alice.employee_name, alice.occupation) == ("Alice", "Engineer")
    assert client.get(alice.image_src).content == b"\x89PNG fake"
