from darkmode.main import main

raise SystemExit(main())
