import sys

from link_protocols.cli import main

sys.exit(main())
