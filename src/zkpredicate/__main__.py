import sys

from zkpredicate.cli import main

sys.exit(main())
