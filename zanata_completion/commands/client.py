"""Global options of the Zanata client"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS


@Command.main("zanata-cli", description="Zanata Java command-line client", args=[
    arg("-v", "--version", action="store_true",
        help="Output version information and exit"),
], includes=[BASIC_OPTIONS])
class ZanataClient:
    """Options accepted before any subcommand"""
