import sys

from vending_machine.main import main


sys.exit(main())
