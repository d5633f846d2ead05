from tfr.cli import main

raise SystemExit(main())
