import sys

from biblen.main import main

sys.exit(main())
