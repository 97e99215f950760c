import sys

from plural_forms.cli import main

sys.exit(main())
