"""Client-side record, image and payload types."""
from pydantic import BaseModel, ConfigDict, Field

from config import PLACEHOLDER_IMAGE_SRC


class ImageFile(BaseModel):
    """A binary picked by the user, kept until the next submit."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class EmployeeRecord(BaseModel):
    """One employee as the page sees it — a list entry or the form draft.

    Field aliases match the server's JSON so list responses validate directly.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    employee_id: int = Field(0, alias="employeeID")
    employee_name: str = Field("", alias="employeeName")
    occupation: str = ""
    image_name: str = Field("", alias="imageName")
    image_src: str = Field(PLACEHOLDER_IMAGE_SRC, alias="imageSrc")
    image_file: ImageFile | None = Field(None, alias="imageFile")


class EmployeePayload(BaseModel):
    """Multipart body for create/update: string-encoded fields + optional binary."""

    employee_id: str
    employee_name: str
    occupation: str
    image_name: str
    image_file: ImageFile | None = None

    def form_data(self) -> dict[str, str]:
        return {
            "employeeID": self.employee_id,
            "employeeName": self.employee_name,
            "occupation": self.occupation,
            "imageName": self.image_name,
        }

    def multipart(self) -> dict:
        """Every field as a multipart part, so the body is multipart even without an image."""
        parts = {key: (None, value) for key, value in self.form_data().items()}
        if self.image_file is not None:
            f = self.image_file
            parts["imageFile"] = (f.filename, f.content, f.content_type)
        return parts
