"""
Command-line interface for lnproto.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from lnproto.config import load_config
from lnproto.__version__ import __version__
from lnproto.context import LnProtoContext
from lnproto.exceptions import ConfigError, LnProtoError
from lnproto.utils.logger import get_logger, setup_logging
from lnproto.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="LNPROTO_CONFIG",
)
@click.option(
    "--proto-dir",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory holding <version>.proto files.",
    envvar="LNPROTO_PROTO_DIR",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="LNPROTO_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="lnproto",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    proto_dir: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """lnproto: match lnd versions to rpc.proto files.

    \b
    Available commands:
      lnproto resolve RAW_VERSION   Find the closest proto for an lnd version
      lnproto versions              List available proto versions
      lnproto latest                Print the newest proto version

    \b
    Examples:
      lnproto resolve "0.5.2-beta commit=v0.5.2-beta-rc3"
      lnproto -d ./protos versions
      lnproto -v latest --path
    """
    _configure_logging(verbose)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    lnproto_ctx = LnProtoContext()
    lnproto_ctx.config_path = config or loaded_config.source_path
    lnproto_ctx.verbose = verbose
    lnproto_ctx.color = color
    lnproto_ctx.config = loaded_config
    lnproto_ctx.proto_dir = proto_dir
    ctx.obj = lnproto_ctx

    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    logger.debug("lnproto v%s", __version__)
    logger.debug("Config path: %s", lnproto_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())
    logger.debug("Proto directory: %s", lnproto_ctx.effective_proto_dir() or "<bundled>")


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


from lnproto.commands.resolve import resolve  # noqa: E402
from lnproto.commands.versions import latest, versions  # noqa: E402

cli.add_command(resolve)
cli.add_command(versions)
cli.add_command(latest)


def main() -> int:
    """Main entry point for the lnproto CLI.

    Returns:
        Exit code:
            0   Success
            1   No match, or an application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except LnProtoError as exc:
        print_error(str(exc))
        logger.debug(
            "LnProtoError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except (KeyboardInterrupt, click.Abort):
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
