"""Import all command modules to register them"""

from . import client
from . import init
from . import pull
from . import push
from . import stats
from . import put_project
from . import put_version
from . import put_user
from . import list_remote
from . import glossary
