import sys
from .disco import main

sys.exit(main())
