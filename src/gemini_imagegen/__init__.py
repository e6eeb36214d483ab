"""
Gemini image generation package.

Provides:
- An adapter that turns a text prompt into image bytes via the Gemini API
- A FastAPI app serving a small web page and POST /api/generate
- A CLI that writes the generated image to disk
"""

__version__ = "0.1.0"
