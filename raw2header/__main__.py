import sys

from raw2header.Raw2Header import Main

sys.exit(Main())
