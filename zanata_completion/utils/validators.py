"""Input validation utilities"""
import re
from typing import Optional


def validate_option_name(name: str) -> tuple[bool, Optional[str]]:
    """
    Validate a command-line flag token

    Rules:
    - Starts with '-'
    - At least one character after the dashes
    - No whitespace or shell metacharacters

    Returns: (is_valid, error_message)

    Examples:
        >>> validate_option_name("--project-config")
        (True, None)
        >>> validate_option_name("source")
        (False, "Option 'source' must start with '-'")
    """
    if not name:
        return False, "Option name cannot be empty"

    if not name.startswith('-'):
        return False, f"Option '{name}' must start with '-'"

    if not name.lstrip('-'):
        return False, f"Option '{name}' has no name after the dashes"

    if not re.match(r'^-{1,2}[A-Za-z0-9][A-Za-z0-9._-]*$', name):
        return False, f"Option '{name}' contains invalid characters"

    return True, None


def validate_command_name(name: str) -> tuple[bool, Optional[str]]:
    """
    Validate a subcommand name

    The name becomes a case pattern and part of a shell variable name in the
    generated script, so only letters, digits and '-' are allowed.

    Examples:
        >>> validate_command_name("put-project")
        (True, None)
        >>> validate_command_name("push;rm")
        (False, "Command 'push;rm' contains invalid characters")
    """
    if not name:
        return False, "Command name cannot be empty"

    if name.startswith('-'):
        return False, f"Command '{name}' must not start with '-'"

    if not re.match(r'^[A-Za-z0-9][A-Za-z0-9-]*$', name):
        return False, f"Command '{name}' contains invalid characters"

    return True, None
