"""Push command"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS, PROJECT_OPTIONS, PUSH_PULL_OPTIONS


@Command.register("push", help="Push source and translation documents to Zanata", args=[
    arg("--push-type", metavar="TYPE",
        help="Type of push to perform: source, trans or both"),
    arg("--merge-type", metavar="TYPE",
        help="Merge type: auto or import"),
    arg("--copy-trans", action="store_true",
        help="Copy latest translations from equivalent documents"),
    arg("--from-doc", metavar="DOCID", help="Resume pushing from this document"),
    arg("--default-project-type", metavar="TYPE",
        help="Project type to assume when none is configured"),
], includes=[PUSH_PULL_OPTIONS, PROJECT_OPTIONS, CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class PushOptions:
    """Options for uploading documents"""
