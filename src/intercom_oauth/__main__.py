import sys

from intercom_oauth.cli import main

sys.exit(main())
