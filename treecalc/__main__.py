import sys

from treecalc.repl import main

sys.exit(main())
