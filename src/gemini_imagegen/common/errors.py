"""Exceptions raised by the image generation adapter."""
from __future__ import annotations


class ImageGenerationError(Exception):
    """Base class for adapter failures."""


class AuthenticationError(ImageGenerationError):
    """No API key was supplied."""


class NoCandidateError(ImageGenerationError):
    """The model returned no candidates."""


class NoImageError(ImageGenerationError):
    """The first candidate carried no inline image data."""


class TransportError(ImageGenerationError):
    """The upstream request failed; the message is the upstream one."""


MISSING_API_KEY = "Missing Google API Key. Please set GOOGLE_API_KEY in your environment."
