#!/usr/bin/env python3
"""CLI for README generation - fetch → classify → generate."""

import argparse
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from ..agents.orchestrator import ReadmePipeline, ReadmeResult
from ..core.config import load_config
from ..core.errors import ReadmeGenError
from ..core.logging import get_logger, redact_sensitive, setup_logging
from ..core.types import ArchetypeLabel
from ..services.prompt_library import AUTO_TEMPLATE, TEMPLATES, get_template, parse_archetype
from ..tools.repo_url import resolve_target
from .export import export_text, write_readme

logger = get_logger(__name__)


def format_templates() -> str:
    """Render the template catalogue, one line per archetype."""
    lines = []
    for label, template in TEMPLATES.items():
        lines.append(f"{template.icon} {label.value:<14} {template.name} - {template.description}")
    return "\n".join(lines)


def format_summary(result: ReadmeResult) -> str:
    template = get_template(result.archetype)
    summary = f"{template.icon} {template.name} README for {result.target.full_name}"
    if result.archetype != result.detected_archetype:
        summary += f" (detected: {result.detected_archetype.value})"
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description="Generate a README.md for a GitHub repository using Gemini"
    )
    parser.add_argument("repo_url", nargs="?", help="Repository URL, e.g. https://github.com/octocat/Hello-World")
    parser.add_argument("-u", "--username", type=str, help="Repository owner (use with --repo)")
    parser.add_argument("-r", "--repo", type=str, help="Repository name (use with --username)")
    parser.add_argument(
        "-t", "--template",
        type=str,
        default=AUTO_TEMPLATE,
        choices=[AUTO_TEMPLATE] + [label.value for label in ArchetypeLabel],
        help="README template (default: auto-detect)"
    )
    parser.add_argument("-o", "--output", type=str, help="Write the README to this path instead of stdout")
    parser.add_argument("--list-templates", action="store_true", help="List available templates and exit")
    parser.add_argument("--config", type=str, help="Path to YAML config (default: configs/readmegen.yaml)")
    parser.add_argument("--log-level", type=str, help="Log level (default: from config)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_templates:
        print(format_templates())
        return 0

    load_dotenv()
    config = load_config(args.config)
    setup_logging(args.log_level or config.logging.level, structured=config.logging.structured)
    logger.debug(f"Configuration: {redact_sensitive(config.model_dump())}")

    try:
        target = resolve_target(args.username, args.repo, args.repo_url)
        archetype = parse_archetype(args.template)
        result = ReadmePipeline.from_config(config).run_sync(target, archetype)
    except ReadmeGenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_summary(result), file=sys.stderr)
    if args.output:
        path = write_readme(result.readme, args.output)
        if path is None:
            print("Error: Generated README is empty", file=sys.stderr)
            return 1
        print(f"Wrote {path}", file=sys.stderr)
    else:
        print(export_text(result.readme))
    return 0


if __name__ == "__main__":
    sys.exit(main())
