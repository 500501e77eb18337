from .export.compiler import main

raise SystemExit(main())
