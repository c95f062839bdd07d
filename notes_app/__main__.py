from notes_app.main import main

raise SystemExit(main())
