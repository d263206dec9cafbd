"""Draft state for the employee form.

The controller owns one ``EmployeeRecord`` draft plus per-field validation
flags.  It never talks to the API itself: ``submit`` hands a payload and a
reset callback to whoever owns the list, and the draft is cleared only when
that callback is invoked.
"""
import base64
import mimetypes
from typing import Callable, Optional

from client.models import EmployeePayload, EmployeeRecord, ImageFile
from config import PLACEHOLDER_IMAGE_SRC
from logger_config import setup_logger

logger = setup_logger("client.form")

# Form field name -> draft attribute
SCALAR_FIELDS = {
    "employeeName": "employee_name",
    "occupation": "occupation",
    "imageName": "image_name",
}

AddOrEdit = Callable[[EmployeePayload, Callable[[], None]], object]


def to_data_uri(content: bytes, content_type: str) -> str:
    return f"data:{content_type};base64,{base64.b64encode(content).decode('ascii')}"


class FormController:
    def __init__(self):
        self.values = EmployeeRecord()
        self.errors: dict[str, bool] = {}

    def set_from_external(self, record: Optional[EmployeeRecord]) -> None:
        """Load *record* for editing, or reset to defaults when None."""
        if record is None:
            self.reset()
            return
        self.values = record.model_copy(deep=True)
        if not self.values.image_src:
            self.values.image_src = PLACEHOLDER_IMAGE_SRC

    def update_field(self, name: str, value: str) -> None:
        setattr(self.values, SCALAR_FIELDS[name], value)

    def select_image(self, upload) -> None:
        """Attach the user's file and derive a ``data:`` preview from it.

        *upload* is any file-like object with ``read`` (Streamlit's
        ``UploadedFile`` included).  None clears the image back to the
        placeholder.  A failed read is logged and leaves the draft as it was.
        """
        if upload is None:
            self.values.image_file = None
            self.values.image_src = PLACEHOLDER_IMAGE_SRC
            return

        filename = getattr(upload, "name", None) or "image"
        content_type = (
            getattr(upload, "type", None)
            or mimetypes.guess_type(filename)[0]
            or "application/octet-stream"
        )
        try:
            upload.seek(0)
            content = upload.read()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read image {filename}: {e}")
            return

        self.values.image_file = ImageFile(filename=filename, content=content, content_type=content_type)
        self.values.image_src = to_data_uri(content, content_type)
        self.values.image_name = filename

    def validate(self) -> bool:
        self.errors = {
            "employeeName": self.values.employee_name != "",
            "imageSrc": self.values.image_src != PLACEHOLDER_IMAGE_SRC,
        }
        return all(self.errors.values())

    def has_error(self, field: str) -> bool:
        return self.errors.get(field) is False

    def build_payload(self) -> EmployeePayload:
        v = self.values
        return EmployeePayload(
            employee_id=str(v.employee_id),
            employee_name=v.employee_name,
            occupation=v.occupation,
            image_name=v.image_name,
            image_file=v.image_file,
        )

    def submit(self, add_or_edit: AddOrEdit) -> bool:
        """Validate and, if the draft passes, call ``add_or_edit(payload, self.reset)``."""
        if not self.validate():
            return False
        add_or_edit(self.build_payload(), self.reset)
        return True

    def reset(self) -> None:
        self.values = EmployeeRecord()
        self.errors = {}
