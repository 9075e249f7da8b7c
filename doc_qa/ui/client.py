"""
HTTP client for the Multilingual Document QA API.
"""

import os
from typing import Any, Dict, List, Optional

import requests

DEFAULT_API_URL = os.getenv("DOC_QA_API_URL", "http://localhost:8000")


class DocumentQAClientError(Exception):
    """Raised when the API returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DocumentQAClient:
    """Thin wrapper over the API endpoints used by the Streamlit app."""

    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: float = 120.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise DocumentQAClientError(f"Could not reach the API at {self.base_url}: {e}") from e

        if not response.ok:
            try:
                detail = response.json().get("detail") or response.text
            except ValueError:
                detail = response.text
            raise DocumentQAClientError(detail, status_code=response.status_code)

        return response.json()

    def list_documents(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/documents").get("documents", [])

    def upload(self, filename: str, content: bytes) -> Dict[str, Any]:
        files = {"file": (filename, content, "application/pdf")}
        return self._request("POST", "/upload", files=files)

    def delete(self, document_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/documents/{document_id}")

    def ask(self, question: str, document_ids: Optional[List[str]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"question": question}
        if document_ids:
            payload["document_ids"] = document_ids
        return self._request("POST", "/ask", json=payload)

    def get_page(self, document_id: str, page_number: int) -> Dict[str, Any]:
        return self._request("GET", f"/documents/{document_id}/page/{page_number}")

    def translate(self, text: str, target_language: str = "en") -> Dict[str, Any]:
        return self._request("POST", "/translate", params={"target_language": target_language}, json=text)
