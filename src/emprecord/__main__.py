"""Run the console demonstration."""

from emprecord.demo import main

raise SystemExit(main())
