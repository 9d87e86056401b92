"""CLI command implementations for the wardrobe application.

- validate: Validate a configuration file
"""

from wardrobe.cli.commands.validate import validate_command

__all__ = ["validate_command"]
