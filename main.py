import sys
from sample_app.program import main

# Console entry point; see sample_app/program.py for options
if __name__ == "__main__":
    sys.exit(main())
