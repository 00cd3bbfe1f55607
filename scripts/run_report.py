import sys
from json_type_report.cli import main

if __name__ == "__main__":
    sys.exit(main())
