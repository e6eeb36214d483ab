"""Generate one image from the command line and save it to disk."""
from __future__ import annotations
import argparse
import logging
from dataclasses import replace

from gemini_imagegen.common.config import Settings
from gemini_imagegen.common.logging_setup import setup_logging
from gemini_imagegen.common.schema import (
    DEFAULT_OUTPUT_PATH,
    GenerationRequest,
    timestamped_output_path,
)
from gemini_imagegen.core.adapter import generate_image

LOGGER = logging.getLogger("imagegen.cli")

SAMPLE_PROMPT = "A photorealistic banana wearing tiny sunglasses, lounging on a sunny beach"

def build_request(argv: list[str] | None = None) -> tuple[GenerationRequest, Settings]:
    ap = argparse.ArgumentParser(description="Generate an image with Gemini")
    ap.add_argument("prompt", nargs="?", default=SAMPLE_PROMPT, help="Text prompt")
    ap.add_argument("--output", default=DEFAULT_OUTPUT_PATH, help="Output image path")
    ap.add_argument("--unique", action="store_true", help="Write to output-<millis>.png instead")
    ap.add_argument("--model", default=None, help="Gemini model id (overrides config)")
    ap.add_argument("--cfg", default=None, help="Optional YAML config path")
    args = ap.parse_args(argv)

    settings = Settings.from_env(args.cfg)
    if args.model:
        settings = replace(settings, model_id=args.model)
    output = timestamped_output_path() if args.unique else args.output
    request = GenerationRequest(prompt=args.prompt, credential=settings.api_key, output_path=output)
    return request, settings

def main(argv: list[str] | None = None) -> None:
    setup_logging()
    request, settings = build_request(argv)
    request.validate()

    LOGGER.info("Generating with %s", settings.model_id)
    path = generate_image(
        request.prompt,
        request.output_path,
        api_key=request.credential,
        model_id=settings.model_id,
        base_url=settings.base_url,
        timeout=settings.timeout,
    )
    print(path)

if __name__ == "__main__":
    main()
