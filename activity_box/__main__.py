import sys

from activity_box.runner import main

if __name__ == "__main__":
    sys.exit(main())
