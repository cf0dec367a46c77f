import sys

from dockerhub_sync.cli import main

sys.exit(main())
