"""Adapter around the Gemini ``generateContent`` REST endpoint.

Sends one prompt, reads the first candidate and either writes the image to
disk or hands back its base64 payload.
"""
from __future__ import annotations
import base64
import logging
from pathlib import Path
from typing import Any

import httpx

from gemini_imagegen.common.errors import (
    MISSING_API_KEY,
    AuthenticationError,
    NoCandidateError,
    NoImageError,
    TransportError,
)
from gemini_imagegen.common.schema import (
    DEFAULT_OUTPUT_PATH,
    EncodedImage,
    GenerationResult,
    InlineData,
    OutputMode,
    ResponsePart,
)

LOGGER = logging.getLogger("imagegen.core.adapter")

DEFAULT_MODEL_ID = "nano-banana-pro-preview"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 120.0
NO_IMAGE_MESSAGE = "No image generated"


def _parse_part(raw: dict[str, Any]) -> ResponsePart:
    # A part carrying both fields keeps both: its text is logged and its
    # payload still counts as an image.
    part = ResponsePart(text=raw.get("text") or None)
    inline = raw.get("inlineData") or raw.get("inline_data")
    if inline:
        part.inline_data = InlineData(
            mime_type=inline.get("mimeType") or inline.get("mime_type") or "image/png",
            data=inline.get("data") or "",
        )
    return part


def parse_response(data: dict[str, Any]) -> GenerationResult:
    """
    Build a GenerationResult from a ``generateContent`` JSON body.

    Only the first candidate is consulted.

    Raises:
        NoCandidateError: if ``candidates`` is missing or empty.
    """
    candidates = data.get("candidates") or []
    if not candidates:
        raise NoCandidateError("No candidates returned from generative model.")

    first = candidates[0] or {}
    content = first.get("content") or {}
    parts = [_parse_part(p) for p in content.get("parts") or []]
    return GenerationResult(parts=parts, finish_reason=first.get("finishReason"))


class ImageGenerator:
    """Generate images for prompts with a fixed Gemini model.

    Args:
        api_key: Google API key. Checked before anything else happens.
        model_id: Model identifier sent in the request path.
        base_url: API root, without trailing slash.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str | None,
        model_id: str = DEFAULT_MODEL_ID,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not api_key:
            raise AuthenticationError(MISSING_API_KEY)
        self.api_key = api_key
        self.model_id = model_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def request(self, prompt: str) -> GenerationResult:
        """Submit ``prompt`` and parse the response."""
        url = f"/models/{self.model_id}:generateContent"
        headers = {"x-goog-api-key": str(self.api_key)}
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            with httpx.Client(base_url=self.base_url, headers=headers, timeout=self.timeout) as client:
                r = client.post(url, json=payload)
                r.raise_for_status()
                data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            LOGGER.error("Gemini request failed: %s", e)
            raise TransportError(str(e)) from e

        return parse_response(data)

    def _image_for(self, prompt: str) -> InlineData:
        result = self.request(prompt)
        for text in result.texts:
            LOGGER.info("Text response: %s", text)

        image = result.image
        if image is None or not image.data:
            LOGGER.warning("No inline image in response (finish_reason=%s)", result.finish_reason)
            raise NoImageError(NO_IMAGE_MESSAGE)
        return image

    def write_to_path(self, prompt: str, output_path: str | Path = DEFAULT_OUTPUT_PATH) -> Path:
        """
        Generate an image and write the decoded bytes to ``output_path``.

        An existing file is overwritten. Nothing is written when the response
        has no inline image.

        Raises:
            NoCandidateError, NoImageError, TransportError
        """
        image = self._image_for(prompt)
        path = Path(output_path)
        with open(path, "wb") as f:
            f.write(base64.b64decode(image.data))
        LOGGER.info("Image saved as %s", path)
        return path

    def encode(self, prompt: str) -> EncodedImage:
        """Generate an image and return its base64 payload unchanged.

        A response without an image is reported in the outcome instead of
        raised; transport failures still propagate.
        """
        try:
            image = self._image_for(prompt)
        except (NoCandidateError, NoImageError):
            return EncodedImage(error=NO_IMAGE_MESSAGE)
        return EncodedImage(image=image.data)

    def generate(
        self,
        prompt: str,
        mode: OutputMode = OutputMode.WRITE_TO_PATH,
        output_path: str | Path = DEFAULT_OUTPUT_PATH,
    ) -> Path | EncodedImage:
        if OutputMode(mode) is OutputMode.RETURN_ENCODED:
            return self.encode(prompt)
        return self.write_to_path(prompt, output_path)


def generate_image(
    prompt: str,
    output_path: str | Path = DEFAULT_OUTPUT_PATH,
    api_key: str | None = None,
    model_id: str = DEFAULT_MODEL_ID,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """
    Generate an image for ``prompt`` and save it to ``output_path``.

    Args:
        prompt: Text prompt.
        output_path: Destination file.
        api_key: Google API key; an empty or missing key raises AuthenticationError.
        model_id: Gemini model to call.

    Returns:
        The path written.
    """
    generator = ImageGenerator(api_key, model_id=model_id, base_url=base_url, timeout=timeout)
    return generator.write_to_path(prompt, output_path)
