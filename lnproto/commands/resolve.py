"""Resolve command implementation for lnproto.

Finds the proto file that best matches the version string reported by an
lnd node (``lncli getinfo`` or ``lnd --version``).

Typical usage::

    $ lnproto resolve "0.5.2-beta commit=v0.5.2-beta-rc3-12-g3a5e8a2"

    # Machine-readable JSON output
    $ lnproto resolve --format json "0.5.1-beta commit=v0.5.1-beta"
"""

from __future__ import annotations

import sys
import json
import click
import asyncio
from typing import Any, Dict, Optional

from rich.markup import escape

from lnproto.exceptions import LnProtoError
from lnproto.context import pass_context, LnProtoContext
from lnproto.models import NormalizationResult
from lnproto.utils import (
    colorize_outcome,
    get_logger,
    get_raw_console,
    print_error,
    print_warning,
)

logger = get_logger("commands.resolve")


@click.command()
@click.argument("raw_version")
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format.",
)
@pass_context
def resolve(ctx: LnProtoContext, raw_version: str, format: str) -> None:
    """Find the proto file closest to an lnd version string.

    RAW_VERSION is the full version string reported by lnd, including the
    ``commit=`` part when available. Quote it on the command line.

    Exits 0 when a proto file was found and 1 when none is old enough or
    an error occurred.
    """
    try:
        found = asyncio.run(_resolve_async(ctx, raw_version, format.lower()))
    except LnProtoError as e:
        print_error(f"{e}")
        sys.exit(1)

    sys.exit(0 if found else 1)


async def _resolve_async(ctx: LnProtoContext, raw_version: str, format: str) -> bool:
    catalog = ctx.build_catalog()
    resolver = ctx.build_resolver()

    versions = await catalog.alist_versions()
    normalization = resolver.normalize(raw_version)
    match = resolver.select(normalization, versions)
    path = str(catalog.resolve_file_path(match)) if match is not None else None

    logger.info("Resolved %r to %s", raw_version, match)

    if format == "json":
        click.echo(json.dumps(_to_json(normalization, match, path), indent=2))
    else:
        _render_text(normalization, match, path)
        if match is None and not versions:
            hint = ctx.bundled_dir_hint()
            if hint is not None:
                print_warning(hint)

    return match is not None


def _to_json(
    normalization: NormalizationResult,
    match: Optional[str],
    path: Optional[str],
) -> Dict[str, Any]:
    return {
        "normalized": normalization.to_json(),
        "match": match,
        "path": path,
    }


def _render_text(
    normalization: NormalizationResult,
    match: Optional[str],
    path: Optional[str],
) -> None:
    console = get_raw_console()
    console.print(
        f"Normalized: {escape(normalization.full_version)} "
        f"({colorize_outcome(normalization.outcome.value)})"
    )

    if normalization.is_fallback:
        print_warning(f"Could not fully parse version string: {normalization.error}")

    if match is None:
        print_error("No proto version at or below the reported version")
        return

    console.print(f"Match:      [highlight]{escape(match)}[/highlight]")
    console.print(f"Path:       {path}", markup=False)
