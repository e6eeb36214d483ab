"""Dataclasses for generation requests, model responses and outcomes."""
from __future__ import annotations
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from gemini_imagegen.common.errors import MISSING_API_KEY, AuthenticationError

DEFAULT_OUTPUT_PATH = "output-image.png"


class OutputMode(str, Enum):
    """Where the generated image ends up."""
    WRITE_TO_PATH = "write-to-path"
    RETURN_ENCODED = "return-encoded"


def timestamped_output_path(directory: str | Path = ".") -> Path:
    """Return a fresh ``output-<millis>.png`` path inside ``directory``."""
    return Path(directory) / f"output-{int(time.time() * 1000)}.png"


@dataclass
class GenerationRequest:
    """A single prompt to turn into an image."""
    prompt: str
    credential: str | None
    output_path: str | Path = DEFAULT_OUTPUT_PATH

    def validate(self) -> None:
        if not self.credential:
            raise AuthenticationError(MISSING_API_KEY)


@dataclass
class InlineData:
    """Base64 payload of an inline response part."""
    mime_type: str
    data: str


@dataclass
class ResponsePart:
    """One part of a candidate: free text or inline binary data."""
    text: str | None = None
    inline_data: InlineData | None = None


@dataclass
class GenerationResult:
    """Parts of the first candidate returned by the model."""
    parts: list[ResponsePart] = field(default_factory=list)
    finish_reason: str | None = None

    @property
    def texts(self) -> list[str]:
        return [p.text for p in self.parts if p.text]

    @property
    def image(self) -> InlineData | None:
        """Last inline part in response order, if any.

        Later inline parts replace earlier ones.
        """
        found = None
        for part in self.parts:
            if part.inline_data is not None:
                found = part.inline_data
        return found


@dataclass
class EncodedImage:
    """Outcome of the return-encoded mode."""
    image: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.image is not None
