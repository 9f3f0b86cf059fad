# pyconfig_resolver/cli.py
"""
Command line entry point: resolve the <py-config> of an HTML page and print it.

    pyconfig-resolve index.html
    pyconfig-resolve index.html --base-url https://example.com/app/ --json-logs
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from pyconfig_resolver.config import ConfigResolver, ResolverSettings, findConfigElement
from pyconfig_resolver.core.errors import UserError
from pyconfig_resolver.core.logging import configureLogging

logger = logging.getLogger(__name__)

__all__ = ["main"]



def _buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyconfig-resolve",
        description="Resolve the <py-config> of an HTML page into its final configuration",
    )
    parser.add_argument("page", type=Path, help="HTML file containing a <py-config> element")
    parser.add_argument("--settings", type=Path, help="JSON/JSON5 resolver settings file")
    parser.add_argument("--base-url", help="Fetch relative `src` locations from this URL")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as one-line JSON")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    return parser



def _loadSettings(args: argparse.Namespace) -> ResolverSettings:
    settings = ResolverSettings.fromFile(args.settings) if args.settings else ResolverSettings()
    overrides: dict[str, object] = {}
    if settings.baseDir is None:
        overrides["baseDir"] = args.page.resolve().parent
    if args.base_url:
        overrides["baseUrl"] = args.base_url
    return settings.model_copy(update=overrides) if overrides else settings



def main(argv: list[str] | None = None) -> int:
    args = _buildParser().parse_args(argv)
    handler = configureLogging(devMode=False, jsonOutput=args.json_logs)
    if args.quiet:
        handler.setLevel(logging.WARNING)

    try:
        markup = args.page.read_text(encoding="utf-8")
    except OSError as err:
        logger.error("Cannot read '%s': %s", args.page, err)
        return 1

    try:
        settings = _loadSettings(args)
    except (OSError, TypeError, ValueError, ValidationError) as err:
        logger.error("Invalid settings '%s': %s", args.settings, err)
        return 1

    try:
        config = ConfigResolver(settings).resolve(findConfigElement(markup))
    except UserError as err:
        logger.error("%s", err)
        return 1
    except OSError as err:
        logger.error("Cannot load defaults '%s': %s", settings.defaultsPath, err)
        return 1

    print(json.dumps(config, indent=2, ensure_ascii=False, default=str))
    return 0



if __name__ == "__main__":
    sys.exit(main())
