"""Stats command"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS, PROJECT_OPTIONS


@Command.register("stats", help="Display translation statistics", args=[
    arg("--details", action="store_true", help="Include document level statistics"),
    arg("--word", action="store_true", help="Show word level statistics"),
    arg("--format", metavar="FORMAT", help="Output format: console or csv"),
    arg("--docid", metavar="DOCID", help="Document to show statistics for"),
], includes=[PROJECT_OPTIONS, CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class StatsOptions:
    pass
