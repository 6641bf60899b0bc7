import sys

from gogo.gogo import main

sys.exit(main())
