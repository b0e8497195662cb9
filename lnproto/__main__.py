"""
Executable module for lnproto.

Running ``python -m lnproto`` is equivalent to running ``lnproto``.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be loaded."""
    sys.stderr.write("lnproto CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from lnproto.__version__ import __version__

        sys.stderr.write(f"lnproto version: {__version__}\n")
    except ImportError:
        sys.stderr.write("lnproto version: <unknown>\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Run the CLI and return its exit code."""
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from lnproto.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
