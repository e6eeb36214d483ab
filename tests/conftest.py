from __future__ import annotations

from typing import Any

import httpx
import pytest

import gemini_imagegen.core.adapter as adapter_mod

PAYLOAD = "YXplcnR5dWlvcA=="


def candidate(*parts: dict[str, Any]) -> dict[str, Any]:
    return {"candidates": [{"content": {"role": "model", "parts": list(parts)}, "finishReason": "STOP"}]}


def inline(data: str, mime_type: str = "image/png") -> dict[str, Any]:
    return {"inlineData": {"mimeType": mime_type, "data": data}}


class _FakeResponse:
    def __init__(self, json_data: dict[str, Any], status_code: int = 200) -> None:
        self._json = json_data
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("POST", "https://example.invalid")
            raise httpx.HTTPStatusError(
                f"Client error '{self.status_code}'",
                request=request,
                response=httpx.Response(self.status_code, request=request),
            )

    def json(self) -> dict[str, Any]:
        return self._json


class _FakeClient:
    def __init__(self, owner: "FakeGemini") -> None:
        self.owner = owner

    def __enter__(self) -> "_FakeClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        return None

    def post(self, url: str, json: dict[str, Any] | None = None) -> _FakeResponse:  # noqa: A002
        self.owner.posts.append((url, json))
        if self.owner.error is not None:
            raise self.owner.error
        return _FakeResponse(self.owner.data, self.owner.status_code)


class FakeGemini:
    """Stands in for ``httpx.Client`` inside the adapter module."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = candidate(inline(PAYLOAD))
        self.status_code = 200
        self.error: Exception | None = None
        self.clients: list[dict[str, Any]] = []
        self.posts: list[tuple[str, dict[str, Any] | None]] = []

    def __call__(self, **kwargs: Any) -> _FakeClient:
        self.clients.append(kwargs)
        return _FakeClient(self)

    def respond_with(self, *parts: dict[str, Any]) -> None:
        self.data = candidate(*parts)


@pytest.fixture
def fake_gemini(monkeypatch: pytest.MonkeyPatch) -> FakeGemini:
    fake = FakeGemini()
    monkeypatch.setattr(adapter_mod.httpx, "Client", fake)
    return fake
