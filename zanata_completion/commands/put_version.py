"""Put-version command"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS


@Command.register("put-version", help="Create or update a project version", args=[
    arg("--version-project", metavar="PROJ", help="Project the version belongs to"),
    arg("--version-slug", metavar="VER", help="Version ID"),
    arg("--project-type", metavar="TYPE", help="Project type of the version"),
], includes=[CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class PutVersionOptions:
    pass
