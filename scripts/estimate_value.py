#!/usr/bin/env python3
"""
Estimate the value of a website from the command line.

Usage:
    python scripts/estimate_value.py DOMAIN [--strategy NAME] [--config PATH]
                                            [--profile NAME] [--verbose]

Exit code: 0 on success, 1 if the estimation failed
"""

import argparse
import logging
import sys
from pathlib import Path

import site_valuator
from site_valuator.adapters import ConsoleAuditLogger, summarize
from site_valuator.config import load_config
from site_valuator.pipeline import ValuationPipeline


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Estimate a website's value")
    parser.add_argument("domain", help="Domain or URL, e.g. https://www.example.com")
    parser.add_argument("--strategy", default=None, help="heuristic or revenue_multiple")
    parser.add_argument(
        "--config", type=Path, default=None,
        help="YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--profile", default=None,
        help="Profile in the profiles/ directory next to the config file",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    site_valuator.configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config, profile=args.profile)

    pipeline = ValuationPipeline(
        config=config,
        audit_logger=ConsoleAuditLogger(verbose=args.verbose),
    )
    result = pipeline.estimate(args.domain, strategy=args.strategy)

    print()
    print(summarize(result))
    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
