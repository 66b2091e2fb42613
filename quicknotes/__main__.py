import sys

from quicknotes.cli import main

sys.exit(main())
