import sys

from tetrasphere.main import main

sys.exit(main())
