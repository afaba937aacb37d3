"""Shared config and route table loading for CLI commands."""

import argparse
import sys

from folio.config import FolioConfig
from folio.errors import FolioError
from folio.routing.resolver import Resolver


def config_from_args(args: argparse.Namespace) -> FolioConfig:
    """Environment-based config with command-line options applied on top."""
    try:
        config = FolioConfig.from_env()
        return config.with_overrides(
            project_root=args.root,
            routes_dir=args.routes_dir,
            extension=args.extension,
            files_list=args.files_list,
            production=True if getattr(args, "production", False) else None,
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
        )
    except FolioError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def resolver_from_args(args: argparse.Namespace) -> Resolver:
    """Build a :class:`Resolver`, exiting 1 on an unusable route table."""
    config = config_from_args(args)
    try:
        return Resolver.from_config(config)
    except FolioError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
