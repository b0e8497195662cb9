"""Catalog listing commands for lnproto.

``lnproto versions`` lists every proto version available in the proto
directory, oldest first. ``lnproto latest`` prints the newest one within
the configured bounds.
"""

from __future__ import annotations

import sys
import click
from typing import Dict, List

from lnproto.exceptions import LnProtoError
from lnproto.core.selector import parse_catalog
from lnproto.context import pass_context, LnProtoContext
from lnproto.utils import get_logger, print_error, print_table, print_warning

logger = get_logger("commands.versions")


@click.command()
@pass_context
def versions(ctx: LnProtoContext) -> None:
    """List available proto versions."""
    catalog = ctx.build_catalog()

    try:
        raw_versions = catalog.list_versions()
    except LnProtoError as e:
        print_error(f"{e}")
        sys.exit(1)

    candidates = parse_catalog(raw_versions)
    skipped = len(raw_versions) - len(candidates)
    if skipped:
        logger.warning("Ignored %d file(s) not named after a semantic version", skipped)

    if not candidates:
        print_warning(f"No proto files found in {catalog.base_path}")
        _print_hint(ctx)
        return

    bounds = ctx.build_resolver().bounds
    rows: List[Dict[str, str]] = []
    for candidate in sorted(candidates, key=lambda c: (c.version, c.build_number or -1)):
        rows.append(
            {
                "Version": candidate.raw,
                "Build": str(candidate.build_number) if candidate.build_number is not None else "",
                "In bounds": "yes" if bounds.contains(candidate.version) else "no",
            }
        )

    print_table(rows, title=f"Proto versions in {catalog.base_path}")


@click.command()
@click.option("--path", "show_path", is_flag=True, help="Print the file path only.")
@pass_context
def latest(ctx: LnProtoContext, show_path: bool) -> None:
    """Print the newest available proto version."""
    catalog = ctx.build_catalog()
    resolver = ctx.build_resolver()

    try:
        version = catalog.latest_version(resolver)
    except LnProtoError as e:
        print_error(f"{e}")
        sys.exit(1)

    if version is None:
        print_error(f"No proto version within bounds {resolver.bounds}")
        _print_hint(ctx)
        sys.exit(1)

    if show_path:
        click.echo(str(catalog.resolve_file_path(version)))
    else:
        click.echo(version)


def _print_hint(ctx: LnProtoContext) -> None:
    hint = ctx.bundled_dir_hint()
    if hint is not None:
        print_warning(hint)
