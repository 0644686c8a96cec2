import sys

from markdown_split.cli import main

sys.exit(main())
