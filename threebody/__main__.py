from .run_simulation import main

raise SystemExit(main())
