# app/cmdline/__main__.py
import sys

from app.cmdline.main import main

sys.exit(main())
