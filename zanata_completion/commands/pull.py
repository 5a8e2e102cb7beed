"""Pull command"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS, PROJECT_OPTIONS, PUSH_PULL_OPTIONS


@Command.register("pull", help="Pull translated documents from Zanata", args=[
    arg("--pull-type", metavar="TYPE",
        help="Type of pull to perform: source, trans or both"),
    arg("--create-skeletons", action="store_true",
        help="Create translation files even with no translations"),
    arg("--min-doc-percent", metavar="PERCENT",
        help="Only pull documents at least this percent translated"),
    arg("--encode-tabs", action="store_true", help="Encode tabs as \\t"),
], includes=[PUSH_PULL_OPTIONS, PROJECT_OPTIONS, CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class PullOptions:
    """Options for downloading documents"""
