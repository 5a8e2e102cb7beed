"""Glossary commands"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS


@Command.register("glossary-push", help="Push a glossary file to Zanata", args=[
    arg("--file", metavar="FILE", help="Glossary file to push (po or csv)"),
    arg("--trans-lang", metavar="LOCALE", help="Translation locale of a po glossary"),
    arg("--source-lang", metavar="LOCALE", help="Source locale of the glossary"),
    arg("--batch-size", metavar="SIZE", help="Entries per request"),
    arg("--qualified-name", metavar="NAME", help="Glossary to push into"),
], includes=[CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class GlossaryPushOptions:
    """Options for uploading a glossary"""


@Command.register("glossary-delete", help="Delete glossary entries from Zanata", args=[
    arg("--id", metavar="ID", help="Glossary entry to delete"),
    arg("--all", action="store_true", help="Delete the entire glossary"),
    arg("--qualified-name", metavar="NAME", help="Glossary to delete from"),
], includes=[CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class GlossaryDeleteOptions:
    pass
