# main.py
import sys

from app.cmdline.main import main

if __name__ == "__main__":
    sys.exit(main())
