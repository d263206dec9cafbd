"""Centralized path and constant configuration with env-var overrides.

All hardcoded paths and magic numbers live here.  Override any path
via the corresponding EMPLOYEE_REGISTER_* environment variable for portability.
"""

import os
from pathlib import Path

# =====================================================================
# DIRECTORY ROOTS (derived from this file's location)
# =====================================================================

_PROJECT_DIR = Path(__file__).resolve().parent

# =====================================================================
# ENVIRONMENT
# =====================================================================

EMPLOYEE_REGISTER_ENV = os.environ.get("EMPLOYEE_REGISTER_ENV", "production")  # production | development

# =====================================================================
# LOGGING CONFIGURATION
# =====================================================================

LOGS_PATH = Path(os.environ.get("EMPLOYEE_REGISTER_LOGS", str(_PROJECT_DIR / "logs")))
LOG_LEVEL = os.environ.get(
    "EMPLOYEE_REGISTER_LOG_LEVEL",
    "DEBUG" if EMPLOYEE_REGISTER_ENV == "development" else "INFO",
)

# =====================================================================
# FASTAPI (Record Service)
# =====================================================================

API_VERSION = "0.1.0"
API_PORT = int(os.environ.get("EMPLOYEE_REGISTER_API_PORT", "8000"))

# Streamlit's default port is the only client origin out of the box.
CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get("EMPLOYEE_REGISTER_CORS_ORIGINS", "http://localhost:8501").split(",")
    if o.strip()
]

DB_PATH = Path(os.environ.get("EMPLOYEE_REGISTER_DB", str(_PROJECT_DIR / "employees.db")))
IMAGES_PATH = Path(os.environ.get("EMPLOYEE_REGISTER_IMAGES", str(_PROJECT_DIR / "images")))
IMAGES_URL_PATH = "/images"

# =====================================================================
# CLIENT (Streamlit page + controllers)
# =====================================================================

API_BASE_URL = os.environ.get("EMPLOYEE_REGISTER_API_URL", f"http://localhost:{API_PORT}/api/employee/")
HTTP_TIMEOUT = float(os.environ.get("EMPLOYEE_REGISTER_HTTP_TIMEOUT", "10"))

# Shown until the user picks an image; a draft still showing it fails validation.
PLACEHOLDER_IMAGE_SRC = (
    "data:image/svg+xml;utf8,"
    "<svg xmlns='http://www.w3.org/2000/svg' width='320' height='200'>"
    "<rect width='320' height='200' fill='%23e0e0e0'/>"
    "<text x='160' y='100' fill='%23757575' font-size='20' "
    "text-anchor='middle' dominant-baseline='middle'>No image</text></svg>"
)
