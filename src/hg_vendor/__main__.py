import sys

from hg_vendor.cli import main

sys.exit(main())
