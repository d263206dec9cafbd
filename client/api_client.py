"""HTTP client for the Employee Register API.

One reusable object per base address; every call raises ``httpx.HTTPError``
on network failure or a non-2xx response.
"""
import httpx

from client.models import EmployeePayload, EmployeeRecord
from config import API_BASE_URL, HTTP_TIMEOUT


class EmployeeAPI:
    def __init__(self, base_url: str = API_BASE_URL, http: httpx.Client | None = None):
        # Trailing slash matters: ids are appended as f"{base_url}{id}".
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._http = http or httpx.Client(timeout=HTTP_TIMEOUT)

    def fetch_all(self) -> list[EmployeeRecord]:
        r = self._http.get(self.base_url)
        r.raise_for_status()
        return [EmployeeRecord.model_validate(item) for item in r.json()]

    def create(self, payload: EmployeePayload) -> EmployeeRecord:
        r = self._http.post(self.base_url, files=payload.multipart())
        r.raise_for_status()
        return EmployeeRecord.model_validate(r.json())

    def update(self, employee_id: int, payload: EmployeePayload) -> None:
        r = self._http.put(f"{self.base_url}{employee_id}", files=payload.multipart())
        r.raise_for_status()

    def delete(self, employee_id: int) -> None:
        r = self._http.delete(f"{self.base_url}{employee_id}")
        r.raise_for_status()

    def health(self) -> dict:
        """Hit ``/health`` on the same host (the resource path is dropped)."""
        url = httpx.URL(self.base_url).copy_with(path="/health")
        r = self._http.get(url)
        r.raise_for_status()
        return r.json()

    def close(self) -> None:
        self._http.close()
