"""CLI entrypoints for brickgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .converter import Converter, render_tree
from .logging import configure_logging
from .parsing.errors import NotFoundError, ParseError


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


def _add_log_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write debug logs to this file.",
    )


def _add_config_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Path to a .brickgen.yml file or the directory holding one.",
    )


def _add_source_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        help="Page URL (http/https) or path to a saved HTML file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brickgen",
        description="Convert Elementor pages into React Bricks components.",
    )
    _add_verbose_option(parser)
    _add_log_options(parser)
    _add_config_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    tree_parser = subparsers.add_parser(
        "tree",
        help="Print the Elementor element tree of a page.",
    )
    _add_verbose_option(tree_parser, suppress_default=True)
    _add_log_options(tree_parser, suppress_default=True)
    _add_config_option(tree_parser, suppress_default=True)
    _add_source_argument(tree_parser)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate React Bricks component source for a page.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_log_options(generate_parser, suppress_default=True)
    _add_config_option(generate_parser, suppress_default=True)
    _add_source_argument(generate_parser)
    generate_parser.add_argument(
        "--element",
        dest="element_id",
        help="Only generate the element with this id (defaults to every top-level element).",
    )
    generate_parser.add_argument(
        "--out",
        type=Path,
        help="Write one file per component into this directory instead of printing.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_log_options(serve_parser, suppress_default=True)
    _add_config_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for brickgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=args.log_file,
    )

    try:
        config = load_config(args.config or Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"brickgen: invalid configuration: {exc}\n")

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port, config=config)
        return

    converter = Converter(config)

    try:
        if args.command == "tree":
            page = converter.parse(args.source)
            print(page.title)
            for line in render_tree(page.elements):
                print(line)
        elif args.command == "generate":
            results = converter.convert(args.source, args.element_id)
            if args.out is not None:
                for path in converter.write(results, args.out):
                    print(f"Component written to {_relativize(path)}")
            else:
                for index, result in enumerate(results):
                    if index:
                        print()
                    print(f"// {result.filename(config.output.extension)}")
                    sys.stdout.write(result.source)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except NotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except ParseError as exc:
        parser.exit(1, f"brickgen {args.command} failed: {exc}\nRun with --verbose for more details.\n")
    except LookupError as exc:
        parser.exit(1, f"{exc.args[0] if exc.args else exc}\n")
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
