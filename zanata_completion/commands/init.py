"""Init command"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS, PROJECT_OPTIONS


@Command.register("init", help="Initialize Zanata project configuration", args=[
    arg("--src-dir", metavar="DIR", help="Base directory for source documents"),
    arg("--trans-dir", metavar="DIR",
        help="Base directory for translated documents"),
], includes=[PROJECT_OPTIONS, CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class InitOptions:
    pass
