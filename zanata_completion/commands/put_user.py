"""Put-user command"""
from ..core.decorators import Command, arg
from .shared import BASIC_OPTIONS, CONFIGURABLE_OPTIONS


@Command.register("put-user", help="Create or update a Zanata user", args=[
    arg("--user-name", metavar="NAME", help="Full name of the user"),
    arg("--user-email", metavar="EMAIL", help="Email address of the user"),
    arg("--user-username", metavar="USERNAME", help="Login name of the user"),
    arg("--user-passwordhash", metavar="PASSWORDHASH", help="User password hash"),
    arg("--user-key", metavar="KEYHASH", help="User API key"),
    arg("--user-langs", metavar="LANGS", help="Language teams for the user"),
    arg("--user-roles", metavar="ROLES", help="Security roles for the user"),
    arg("--user-disabled", action="store_true", help="Whether the account is disabled"),
], includes=[CONFIGURABLE_OPTIONS, BASIC_OPTIONS])
class PutUserOptions:
    pass
