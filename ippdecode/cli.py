import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ippdecode.config import get_settings
from ippdecode.errors import MalformedMessage
from ippdecode.logging import create_logger, get_ring_buffer
from ippdecode.parsing.message import decode_message
from ippdecode.rendering import TextRenderer, load_name_tables

EXIT_OK = 0
EXIT_MALFORMED = 1
EXIT_NOT_FOUND = 2


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ippdecode", description="Decode and display a binary IPP message.")
    parser.add_argument("file", help="Path to the IPP message, or '-' to read stdin.")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format.")
    parser.add_argument("--names", type=str, default=None, help="JSON file with extra operation/status/enum names.")
    parser.add_argument("--preview-bytes", type=int, default=None, help="Octet bytes shown before truncating.")
    parser.add_argument("--verbose", action="store_true", help="Log decoder events to stderr.")
    args = parser.parse_args(argv)

    overrides = {}
    if args.names is not None:
        overrides["names_file"] = args.names
    if args.preview_bytes is not None:
        overrides["octet_preview_bytes"] = args.preview_bytes
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    try:
        settings = get_settings()
        if overrides:
            settings = settings.with_overrides(**overrides)
    except ValidationError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return EXIT_MALFORMED

    logger = create_logger("ippdecode", settings.log_ring_size, settings.log_level_number)
    ring = get_ring_buffer(logger)
    if ring is not None:
        ring.clear()

    try:
        data = _read_input(args.file)
    except FileNotFoundError:
        print(f"File not found: {args.file}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except OSError as exc:
        print(f"Cannot read {args.file}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_NOT_FOUND

    try:
        message = decode_message(data)
    except MalformedMessage as exc:
        print(f"Error parsing IPP message: {exc}", file=sys.stderr)
        return EXIT_MALFORMED

    if args.format == "json":
        payload = {
            "message": message.as_dict(),
            "diagnostics": ring.get_events() if ring is not None else [],
        }
        print(json.dumps(payload, indent=2, default=str))
        return EXIT_OK

    try:
        names = load_name_tables(settings.names_file)
    except FileNotFoundError:
        print(f"File not found: {settings.names_file}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except OSError as exc:
        print(f"Cannot read {settings.names_file}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except ValueError as exc:
        print(f"Invalid name table file: {exc}", file=sys.stderr)
        return EXIT_MALFORMED
    renderer = TextRenderer.from_settings(settings, names)
    for line in renderer.render(message):
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
