import sys

from pfcli.cli.main import main

sys.exit(main())
