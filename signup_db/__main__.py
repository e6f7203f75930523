from signup_db.main import main

raise SystemExit(main())
