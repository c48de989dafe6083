"""CLI: chunk subcommand."""

from __future__ import annotations

import argparse
import sys

from blockprint.config import DEFAULT_SETTINGS_YAML
from blockprint.pipeline.chunker import BlockChunker
from blockprint.pipeline.config_loader import load_settings
from blockprint.pipeline.jsonl import read_resources, write_blocks
from blockprint.pipeline.models import ChunkerSettings
from blockprint.pipeline.runner import ChunkRunner
from blockprint.utils.logging import get_logger, setup_logging

log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockprint",
        description="blockprint - rolling-hash block fingerprints for duplicate code detection",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # chunk
    chunk = sub.add_parser("chunk", help="Fingerprint statement JSONL into block JSONL")
    chunk.add_argument("input", help="Path to statement JSONL (one resource per line)")
    chunk.add_argument("--config", default=None, help="Path to blockprint.yaml")
    chunk.add_argument("--block-size", type=int, default=None, help="Statements per block (overrides config)")
    chunk.add_argument("--workers", type=int, default=None, help="Parallel workers (overrides config)")
    chunk.add_argument("--output", default=None, help="Output file path (default: stdout)")
    chunk.add_argument("--verbose", action="store_true", help="Enable debug logging")
    chunk.add_argument("--log-json", action="store_true", help="Render log events as JSON")

    return parser


def _resolve_settings(args: argparse.Namespace) -> ChunkerSettings:
    if args.config:
        settings = load_settings(args.config)
    elif DEFAULT_SETTINGS_YAML.exists():
        settings = load_settings(DEFAULT_SETTINGS_YAML)
    else:
        settings = ChunkerSettings()

    if args.block_size is not None:
        settings.block_size = args.block_size
    if args.workers is not None:
        settings.workers = args.workers
    return settings


def _run_chunk(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    setup_logging(verbose=args.verbose, json_logs=args.log_json)

    try:
        settings = _resolve_settings(args)
        chunker = BlockChunker(settings.block_size)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))
    if settings.workers < 1:
        parser.error(f"--workers must be >= 1, got {settings.workers}")

    try:
        resources = read_resources(args.input)
    except (FileNotFoundError, ValueError) as e:
        log.error("read_failed", path=args.input, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.info("starting_chunk", resources=len(resources), block_size=chunker.block_size, workers=settings.workers)
    result = ChunkRunner(chunker, resources, workers=settings.workers).run()

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            write_blocks(result.all_blocks(), f)
    else:
        write_blocks(result.all_blocks(), sys.stdout)

    print(result.summary(), file=sys.stderr)
    return 1 if result.errors else 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "chunk":
        return _run_chunk(args, parser)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
