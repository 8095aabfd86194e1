"""Allow ``python -m termai`` invocation."""

from termai.cli import main

raise SystemExit(main())
