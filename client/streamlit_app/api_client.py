"""HTTP client for the chat backend. Every call returns the decoded envelope."""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from config import BACKEND_BASE_URL


class APIClient:
    def __init__(self, base_url: str = BACKEND_BASE_URL, timeout: int = 30) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # -------------------- Users --------------------
    def add_user(self, name: str, password: str, user_id: Optional[int] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": name, "password": password}
        if user_id is not None:
            payload["id"] = user_id
        return self._post("/user/add", json=payload)

    def search_user(self, user_id: int) -> Dict[str, Any]:
        return self._post("/user/search", json={"id": user_id})

    def delete_user(self, user_id: int, name: str, password: str) -> Dict[str, Any]:
        payload = {"id": user_id, "name": name, "password": password}
        return self._post("/user/delete", json=payload)

    # -------------------- Rooms --------------------
    def create_room(self, room_name: str, password: str) -> Dict[str, Any]:
        payload = {"room_id": None, "room_name": room_name, "password": password, "user_id": None}
        return self._post("/room/create", json=payload)

    def enter_room(self, room_id: int, room_name: str, password: str, user_id: int) -> Dict[str, Any]:
        payload = {"room_id": room_id, "room_name": room_name, "password": password, "user_id": user_id}
        return self._post("/room/enter", json=payload)

    # -------------------- Messages --------------------
    def get_messages(self, room_id: int) -> Dict[str, Any]:
        # the endpoint takes the bare id as the JSON body
        return self._post("/message/get", json=room_id)

    def send_message(self, room_id: int, text: str) -> Dict[str, Any]:
        return self._post("/message/send", json={"text": text, "room_id": room_id})

    def health(self) -> Dict[str, Any]:
        res = requests.get(f"{self.base_url}/health", timeout=self.timeout)
        res.raise_for_status()
        return res.json()

    # -------------------- Internal helpers --------------------
    def _post(self, path: str, json: Any = None) -> Dict[str, Any]:
        res = requests.post(
            f"{self.base_url}{path}",
            json=json,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        try:
            res.raise_for_status()
        except requests.HTTPError as exc:
            detail = f"POST {path} -> {res.status_code} {res.reason}; body={res.text}"
            raise requests.HTTPError(detail, response=res) from exc
        return res.json() if res.text else {}


def get_client(base_url: str | None = None) -> APIClient:
    return APIClient(base_url=base_url or BACKEND_BASE_URL)
