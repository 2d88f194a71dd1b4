import sys

from sandspline.main import main

sys.exit(main())
