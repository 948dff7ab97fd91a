"""Run a single generation against a local inference server from the shell."""
from __future__ import annotations
import argparse
import asyncio
import logging
import sys
import time
from dataclasses import replace

from local_inference_client.client.errors import GenerationError
from local_inference_client.client.generation import GenerationClient
from local_inference_client.common.config import ClientSettings, load_settings
from local_inference_client.common.logging_setup import setup_logging
from local_inference_client.common.templates import load_template, render_prompt

LOGGER = logging.getLogger("local_inference.cli")

async def run_generate(settings: ClientSettings, prompt: str) -> str:
    async with GenerationClient.from_settings(settings) as client:
        return await client.generate(prompt)

def main(argv: list[str] | None = None) -> int:
    setup_logging()
    ap = argparse.ArgumentParser(description="Generate text with a local inference server")
    ap.add_argument("--text", required=True, help="User input text")
    ap.add_argument("--cfg", default=None, help="YAML config path")
    ap.add_argument("--endpoint", default=None, help="Server base URL, e.g. http://localhost:11434")
    ap.add_argument("--model", default=None, help="Model identifier")
    ap.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    ap.add_argument("--template", default=None, help="Prompt template containing {{input}}")
    args = ap.parse_args(argv)

    settings = load_settings(args.cfg)
    overrides = {
        "endpoint": args.endpoint,
        "model": args.model,
        "timeout_seconds": args.timeout,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})

    prompt = args.text
    if args.template:
        prompt = render_prompt(load_template(args.template), args.text)

    start = time.time()
    try:
        text = asyncio.run(run_generate(settings, prompt))
    except GenerationError as e:
        LOGGER.error("%s", e)
        return 1
    LOGGER.info("Latency: %sms", int((time.time() - start) * 1000))
    print(text)
    return 0

if __name__ == "__main__":
    sys.exit(main())
