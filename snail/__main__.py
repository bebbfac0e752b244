import sys

from snail.main import main

sys.exit(main())
