"""CLI entrypoints for readmegen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .composer import Composer, ReadmeGenerationError
from .config import ConfigError, ReadmeGenConfig, load_config, load_project
from .export.github import ExportError, GitHubExporter
from .logging import configure_logging
from .models import TemplateType
from .sections.constants import sections_for


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


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write timestamped log records to this file.",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .readmegen.yml or the directory containing it (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Compose README files from a structured project description.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Render a README from a YAML project description.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_log_file_option(generate_parser, suppress_default=True)
    _add_config_option(generate_parser)
    generate_parser.add_argument("project", help="Path to the project description YAML file.")
    generate_parser.add_argument(
        "-o",
        "--output",
        help="File to write the README to (defaults to stdout).",
    )

    export_parser = subparsers.add_parser(
        "export",
        help="Create or update README.md in a GitHub repository.",
    )
    _add_verbose_option(export_parser, suppress_default=True)
    _add_log_file_option(export_parser, suppress_default=True)
    _add_config_option(export_parser)
    export_parser.add_argument("readme", help="Path to the README file to publish.")
    export_parser.add_argument(
        "--repository-url",
        required=True,
        help="GitHub repository URL, for example https://github.com/owner/repo.",
    )
    export_parser.add_argument(
        "--token",
        help="GitHub access token (defaults to config or GITHUB_TOKEN).",
    )

    templates_parser = subparsers.add_parser(
        "templates",
        help="List template variants and the sections each one adds.",
    )
    _add_verbose_option(templates_parser, suppress_default=True)
    _add_log_file_option(templates_parser, suppress_default=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_log_file_option(serve_parser, suppress_default=True)
    _add_config_option(serve_parser)
    serve_parser.add_argument("--host", help="Interface to bind (defaults to config or 0.0.0.0).")
    serve_parser.add_argument("--port", type=int, help="Port to bind (defaults to config or 8000).")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readmegen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command == "templates":
        for template in TemplateType:
            print(f"{template.value} ({template.display_name}): {', '.join(sections_for(template))}")
        return

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "generate":
        _run_generate(parser, args, config)
    elif args.command == "export":
        _run_export(parser, args, config)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(
            args.host or config.service.host,
            args.port or config.service.port,
            config=config,
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_generate(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: ReadmeGenConfig
) -> None:
    try:
        project = load_project(Path(args.project), config)
        markdown = Composer().compose(project)
    except (FileNotFoundError, ConfigError) as exc:
        parser.exit(1, f"{exc}\n")
    except ReadmeGenerationError as exc:
        parser.exit(1, f"readmegen generate failed: {exc}\nRun with --verbose for more details.\n")

    if not args.output:
        sys.stdout.write(markdown)
        return
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markdown, encoding="utf-8")
    print(f"README written to {_relativize(output)}")


def _run_export(
    parser: argparse.ArgumentParser, args: argparse.Namespace, config: ReadmeGenConfig
) -> None:
    readme = Path(args.readme)
    if not readme.is_file():
        parser.exit(1, f"README file not found: {readme}\n")

    exporter = GitHubExporter(
        api_url=config.github.api_url,
        default_token=config.github.token,
        request_timeout=config.github.request_timeout,
    )
    try:
        outcome = exporter.export(
            args.repository_url,
            readme.read_text(encoding="utf-8"),
            args.token,
        )
    except ExportError as exc:
        parser.exit(1, f"readmegen export failed: {exc}\n")
    print(outcome.message)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
