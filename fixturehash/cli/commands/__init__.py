"""CLI commands for fixturehash."""

from fixturehash.cli.commands.hash import hash_cmd
from fixturehash.cli.commands.verify import verify_cmd, check_cmd
from fixturehash.cli.commands.key import key_cmd
from fixturehash.cli.commands.config import config_cmd

__all__ = ['hash_cmd', 'verify_cmd', 'check_cmd', 'key_cmd', 'config_cmd']
