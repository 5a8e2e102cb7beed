import sys

from zanata_completion.main import main

sys.exit(main())
