"""CLI entrypoints for glyphgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, GlyphGenConfig, load_config
from .gallery import GalleryExporter
from .logging import configure_logging, get_logger, log_exception
from .manifest import load_manifest
from .orchestrator import BuildOrchestrator
from .watch import WatchOrchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glyphgen",
        description="Compile icon directories into React components, an index and type declarations.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help=f"Path to {CONFIG_FILENAME} or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Run a full build, then rebuild icons as their files change.",
    )
    subparsers = parser.add_subparsers(dest="command")

    gallery_parser = subparsers.add_parser(
        "gallery",
        help="Render the HTML gallery from the last build's manifest.",
    )
    _add_verbose_option(gallery_parser, suppress_default=True)
    gallery_parser.add_argument(
        "--output",
        default=None,
        help="Where to write the gallery page (defaults to gallery.path from the config).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Expose builds, the manifest and the gallery over HTTP.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for glyphgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    verbose = bool(getattr(args, "verbose", False))
    configure_logging(verbose=verbose)
    logger = get_logger("cli")

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    if config.log_file is not None:
        configure_logging(verbose=verbose, log_file=config.log_file)

    try:
        if args.command == "gallery":
            _run_gallery(config, args.output)
        elif args.command == "serve":
            from .service import run_service

            run_service(lambda: BuildOrchestrator(config), host=args.host, port=args.port)
        elif args.watch:
            WatchOrchestrator(BuildOrchestrator(config)).run_watch()
        else:
            BuildOrchestrator(config).run_full_build()
    except KeyboardInterrupt:
        parser.exit(130, "Interrupted\n")
    except Exception as exc:
        log_exception(logger, "glyphgen failed", exc)
        parser.exit(1, "Run with --verbose for more details.\n")


def _run_gallery(config: GlyphGenConfig, output: str | None) -> None:
    entries = load_manifest(config.out_dir)
    destination = Path(output).resolve() if output else config.gallery.path
    path = GalleryExporter.from_config(config).export(entries, destination)
    print(f"Gallery saved to {_relativize(path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
