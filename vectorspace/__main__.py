from vectorspace.examples.monty_hall import main

raise SystemExit(main())
