"""List-remote command"""
from ..core.decorators import Command
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS, PROJECT_OPTIONS


@Command.register("list-remote", help="List remote documents",
                  includes=[PROJECT_OPTIONS, CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class ListRemoteOptions:
    pass
