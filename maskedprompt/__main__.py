"""
module maskedprompt.__main__

Default entrypoint when maskedprompt is invoked on the console by a user.
Calls the main() function in maskedprompt.entrypoint
"""

import sys

from .entrypoint import main

sys.exit(main())
