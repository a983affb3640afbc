from hnitems.cli import main

raise SystemExit(main())
