"""Option groups shared between commands"""
from ..core.decorators import arg

BASIC_OPTIONS = (
    arg("-B", "--batch-mode", action="store_true",
        help="Run in batch mode (non-interactive)"),
    arg("-X", "--debug", action="store_true", help="Enable debug logging"),
    arg("-e", "--errors", action="store_true",
        help="Print stack traces for errors"),
    arg("-h", "--help", action="store_true", help="Display this help and exit"),
    arg("-q", "--quiet", action="store_true", help="Quiet mode: only errors"),
)

CONFIGURABLE_OPTIONS = (
    arg("--url", metavar="URL", help="Base URL for the server"),
    arg("--username", metavar="USER", help="Username for the server"),
    arg("--key", metavar="KEY", help="API key for the server"),
    arg("--user-config", metavar="FILE",
        help="User configuration, eg $HOME/.config/zanata.ini"),
    arg("--disable-ssl-cert", action="store_true",
        help="Disable SSL certificate verification"),
    arg("--log-http", action="store_true", help="Log HTTP requests"),
)

PROJECT_OPTIONS = (
    arg("--project", metavar="PROJ", help="Project ID"),
    arg("--project-version", metavar="VER", help="Project version ID"),
    arg("--project-type", metavar="TYPE",
        help="Type of project (file, gettext, podir, properties, utf8properties, xliff, xml)"),
    arg("--project-config", metavar="FILENAME",
        help="Project configuration, eg zanata.xml"),
    arg("--locales", metavar="LOCALE,LOCALE", help="Locales to process"),
)

PUSH_PULL_OPTIONS = (
    arg("-s", "--src-dir", metavar="DIR",
        help="Base directory for source documents"),
    arg("-t", "--trans-dir", metavar="DIR",
        help="Base directory for translated documents"),
    arg("--includes", metavar="GLOB", help="Wildcard patterns to include"),
    arg("--excludes", metavar="GLOB", help="Wildcard patterns to exclude"),
    arg("--dry-run", action="store_true",
        help="Validate settings without contacting the server"),
    arg("--file-types", metavar="TYPES", help="File types to process"),
)
