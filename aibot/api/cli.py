"""
Interactive console adapter.

Architectural role:
- Lets an operator talk to the bot without Discord.
- Uses the same engine calls as the Discord adapter, so replies (including
  the keyword fallback) match what a channel would see.

Request lifecycle (per line):
1. Read a line from stdin; ignore empty input.
2. `exit` / `quit` stop the session.
3. `/image <description> [--style <id>]` generates an image and writes it to
   the working directory.
4. Anything else is answered by `generate_reply`, or directly by the fallback
   responder when started with `--offline`.

Error handling strategy:
- EOF and keyboard interrupts end the loop without a traceback.
"""

import argparse
import asyncio
import logging
import os

from aibot.core.engine import generate_reply, render_image
from aibot.image.service import DEFAULT_STYLE, STYLES
from aibot.nlp.fallback import FallbackResponder


IMAGE_COMMAND = "/image"


def parse_image_command(line: str) -> tuple[str, str]:
    """Split `/image <description> [--style <id>]` into description and style."""
    body = line[len(IMAGE_COMMAND):].strip()
    style = DEFAULT_STYLE

    if " --style " in f" {body} ":
        body, _, style = f" {body} ".rpartition(" --style ")
        body = body.strip()
        style = style.strip() or DEFAULT_STYLE

    return body, style


async def _handle_line(line: str, responder: FallbackResponder, offline: bool) -> str:
    if line == IMAGE_COMMAND or line.startswith(IMAGE_COMMAND + " "):
        prompt, style = parse_image_command(line)
        if not prompt:
            return f"Usage: {IMAGE_COMMAND} <description> [--style {'|'.join(STYLES)}]"

        reply = await render_image(prompt, style)
        if reply.image is None:
            return reply.content

        path = os.path.abspath(reply.filename)
        with open(path, "wb") as f:
            f.write(reply.image)
        return f"{reply.content}\n{path}"

    if offline:
        return responder.respond(line)

    return await generate_reply(line, responder)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Chat with the bot from a terminal.")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="answer with the keyword fallback only, without calling the text model",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    responder = FallbackResponder()

    print("Bot console started. (Type 'exit' to quit)\n")
    print("-" * 60)

    while True:
        try:
            line = input("You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue

        if line.lower() in ("exit", "quit"):
            break

        print(f"\nBot: {asyncio.run(_handle_line(line, responder, args.offline))}")
        print("\n" + "-" * 60 + "\n")


if __name__ == "__main__":
    main()
