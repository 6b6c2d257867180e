from sampling_spectrum_analyzer.cli import main

raise SystemExit(main())
