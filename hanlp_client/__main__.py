import sys

from hanlp_client.api.cli import main

sys.exit(main())
