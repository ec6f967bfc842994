import sys

from last_success_sha.main import main

sys.exit(main())
