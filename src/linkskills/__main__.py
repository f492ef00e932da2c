"""Allow ``python -m linkskills``."""

from linkskills.cli.main import main

raise SystemExit(main())
