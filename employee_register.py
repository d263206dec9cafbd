"""
Employee Register — Streamlit front end for the Employee Register API.
Form on the left, card grid on the right; every mutation re-fetches the list.

Run with: python -m streamlit run employee_register.py
(API first: uvicorn api.main:app --port 8000)
"""

import html

import httpx
import streamlit as st

from client.api_client import EmployeeAPI
from client.form_controller import FormController
from client.list_controller import DELETE_PROMPT, ListController
from config import API_BASE_URL, PLACEHOLDER_IMAGE_SRC
from logger_config import setup_logger

logger = setup_logger("employee_register")

st.set_page_config(page_title="Employee Register", layout="wide")

# =====================================================================
# SESSION STATE
# =====================================================================

@st.cache_resource
def _employee_api():
    """One HTTP connection pool for every browser session of this process."""
    return EmployeeAPI(API_BASE_URL)


if "employee_list" not in st.session_state:
    ctrl = ListController(_employee_api(), FormController())
    ctrl.refresh()
    st.session_state["employee_list"] = ctrl
    st.session_state["form_version"] = 0

ctrl: ListController = st.session_state["employee_list"]
form = ctrl.form


def _bump_form():
    """Re-key the widgets so they pick up the controller's draft values."""
    st.session_state["form_version"] += 1


# =====================================================================
# CARD RENDERING
# =====================================================================

def _image_card(src, title, subtitle="", height=140, error=False):
    border = "2px solid #d32f2f" if error else "1px solid #e0e0e0"
    return (
        f'<div style="border:{border};border-radius:0.5rem;overflow:hidden;'
        f'background:#fff;box-shadow:0 2px 6px rgba(0,0,0,0.12);margin-bottom:0.5rem;">'
        f'<img src="{html.escape(src, quote=True)}" '
        f'style="width:100%;height:{height}px;object-fit:cover;" alt="Employee" />'
        f'<div style="padding:0.5rem 0.75rem;">'
        f'<div style="font-size:1.15rem;font-weight:700;">{html.escape(title)}</div>'
        f'<div style="font-size:0.85rem;color:#757575;">{html.escape(subtitle)}</div>'
        f'</div></div>'
    )


# =====================================================================
# HEADER
# =====================================================================

st.markdown("<h1 style='text-align:center;'>Employee Register</h1>", unsafe_allow_html=True)

try:
    if ctrl.api.health().get("db") != "connected":
        st.error("Employee API is up but its database is not reachable")
except httpx.HTTPError as e:
    logger.error(f"API unreachable at {API_BASE_URL}: {e}")
    st.error(f"Employee API unreachable at {API_BASE_URL}")

if ctrl.last_error:
    st.warning(ctrl.last_error)

form_col, list_col = st.columns([1, 2])

# =====================================================================
# FORM
# =====================================================================

with form_col:
    st.subheader("An Employee")
    v = st.session_state["form_version"]
    st.markdown(
        _image_card(form.values.image_src, "", height=200, error=form.has_error("imageSrc")),
        unsafe_allow_html=True,
    )

    def _on_image_change(key):
        form.select_image(st.session_state[key])

    image_key = f"imageFile_{v}"
    st.file_uploader(
        "Upload Image", type=["png", "jpg", "jpeg", "gif", "webp"],
        key=image_key, on_change=_on_image_change, args=(image_key,),
    )
    name = st.text_input("Employee Name", value=form.values.employee_name, key=f"employeeName_{v}")
    if form.has_error("employeeName"):
        st.caption(":red[Employee name is required]")
    occupation = st.text_input("Occupation", value=form.values.occupation, key=f"occupation_{v}")

    if st.button("Submit", type="primary", use_container_width=True):
        form.update_field("employeeName", name)
        form.update_field("occupation", occupation)
        form.submit(ctrl.add_or_edit)
        _bump_form()
        st.rerun()

# =====================================================================
# CARD GRID
# =====================================================================

@st.dialog("Delete employee")
def _confirm_delete(employee_id):
    st.write(DELETE_PROMPT)
    yes, no = st.columns(2)
    if yes.button("Yes", type="primary", use_container_width=True):
        ctrl.delete_record(employee_id, confirm=lambda _prompt: True)
        st.rerun()
    if no.button("No", use_container_width=True):
        ctrl.delete_record(employee_id, confirm=lambda _prompt: False)
        st.rerun()


with list_col:
    if not ctrl.employees:
        st.info("No employees yet.")
    grid = st.columns(3)
    for i, employee in enumerate(ctrl.employees):
        with grid[i % 3]:
            st.markdown(
                _image_card(employee.image_src or PLACEHOLDER_IMAGE_SRC, employee.employee_name, employee.occupation),
                unsafe_allow_html=True,
            )
            edit_btn, delete_btn = st.columns(2)
            if edit_btn.button("Edit", key=f"edit_{employee.employee_id}", use_container_width=True):
                ctrl.select_for_edit(employee)
                _bump_form()
                st.rerun()
            if delete_btn.button("Delete", key=f"delete_{employee.employee_id}", use_container_width=True):
                _confirm_delete(employee.employee_id)
