import sys

from binding_fixups.cli import main

sys.exit(main())
