"""Put-project command"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS


@Command.register("put-project", help="Create or update a Zanata project", args=[
    arg("--project-slug", metavar="PROJ", help="Project ID"),
    arg("--project-name", metavar="NAME", help="Project name"),
    arg("--project-desc", metavar="DESC", help="Project description"),
    arg("--source-homepage", metavar="URL", help="Project homepage"),
    arg("--source-view-url", metavar="URL", help="Source code viewer"),
    arg("--source-checkout-url", metavar="URL", help="Source code repository"),
    arg("--default-project-type", metavar="TYPE", help="Default project type"),
], includes=[CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class PutProjectOptions:
    pass
