import sys

from progress_report.cli import main

sys.exit(main())
