import sys

from qshell.cmd.shell import main

sys.exit(main())
