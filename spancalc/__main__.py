from spancalc.main import main

raise SystemExit(main())
