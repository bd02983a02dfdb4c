# CLI - test vector inspection commands

from dgc_testdata.cli.main import app

__all__ = ["app"]
