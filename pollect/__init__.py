r"""
'    __________        .__  .__                 __
'    \______   \ ____  |  | |  |   ____   _____/  |_
'     |     ___//  _ \ |  | |  | _/ __ \_/ ___\   __\
'     |    |   (  <_> )|  |_|  |_\  ___/\  \___|  |
'     |____|    \____/ |____/____/\___  >\___  >__|
'                                     \/     \/
"""

# expose the main classes
from .collection import Collection
from .store import Store

# expose the factory functions
from .factories import (
    collect,
    empty,
    times,
    pollect,
    C
)

# expose supporting types and comparison rules
from .types import Shape, MISSING
from .comparison import loose_equals, strict_equals, compare

# define what `import *` does
__all__ = [
    "Collection",
    "Store",
    "collect",
    "empty",
    "times",
    "pollect",
    "C",
    "Shape",
    "MISSING",
    "loose_equals",
    "strict_equals",
    "compare"
]
