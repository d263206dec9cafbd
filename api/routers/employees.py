"""Employee CRUD endpoints (multipart in, camelCase JSON out)."""
from urllib.parse import quote

from fastapi import APIRouter, File, Form, HTTPException, Request, Response, UploadFile, status

from api.database import get_db
from api.images import delete_image, save_image
from api.models import Employee
from config import IMAGES_URL_PATH
from logger_config import setup_logger

router = APIRouter()
logger = setup_logger("api.employees")


def _image_src(request: Request, image_name: str) -> str:
    if not image_name:
        return ""
    return f"{str(request.base_url).rstrip('/')}{IMAGES_URL_PATH}/{quote(image_name)}"


def _row_to_employee(row, request: Request) -> Employee:
    return Employee(
        id=row["id"],
        employee_name=row["employee_name"],
        occupation=row["occupation"],
        image_name=row["image_name"],
        image_src=_image_src(request, row["image_name"]),
    )


def _get_row_or_404(con, employee_id: int):
    row = con.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return row


@router.get("/", response_model=list[Employee])
def list_employees(request: Request):
    with get_db() as con:
        rows = con.execute("SELECT * FROM employees ORDER BY id").fetchall()
    return [_row_to_employee(r, request) for r in rows]


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: int, request: Request):
    with get_db() as con:
        return _row_to_employee(_get_row_or_404(con, employee_id), request)


@router.post("/", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(
    request: Request,
    employee_name: str = Form(..., alias="employeeName", min_length=1, max_length=200),
    occupation: str = Form("", max_length=200),
    image_file: UploadFile | None = File(None, alias="imageFile"),
):
    # employeeID / imageName are accepted from the form but the store assigns both.
    image_name = save_image(image_file) if image_file is not None else ""
    with get_db() as con:
        cur = con.execute(
            "INSERT INTO employees (employee_name, occupation, image_name) VALUES (?, ?, ?)",
            (employee_name, occupation, image_name),
        )
        row = _get_row_or_404(con, cur.lastrowid)
    logger.info(f"Created employee {row['id']} ({employee_name})")
    return _row_to_employee(row, request)


@router.put("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_employee(
    employee_id: int,
    employee_name: str = Form(..., alias="employeeName", min_length=1, max_length=200),
    occupation: str = Form("", max_length=200),
    image_file: UploadFile | None = File(None, alias="imageFile"),
):
    # The old file goes only after the row points at the new one.
    new_image = None
    try:
        with get_db() as con:
            row = _get_row_or_404(con, employee_id)  # 404 check before touching files
            old_image = image_name = row["image_name"]
            if image_file is not None:
                new_image = image_name = save_image(image_file)
            con.execute(
                """UPDATE employees
                   SET employee_name = ?, occupation = ?, image_name = ?, updated_at = datetime('now')
                   WHERE id = ?""",
                (employee_name, occupation, image_name, employee_id),
            )
    except Exception:
        if new_image:
            delete_image(new_image)
        raise
    if new_image:
        delete_image(old_image)
    logger.info(f"Updated employee {employee_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: int):
    with get_db() as con:
        row = _get_row_or_404(con, employee_id)
        con.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
    delete_image(row["image_name"])
    logger.info(f"Deleted employee {employee_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
