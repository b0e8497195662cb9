"""Click subcommands of the lnproto CLI."""
