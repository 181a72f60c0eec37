import sys

from calc_analyzer.main import main

sys.exit(main())
