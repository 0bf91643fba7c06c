"""
CGPE - Cartesian Genetic Programming Expressions

Represents an expression as a fixed-length integer genotype, decodes it into
its active computation graph, evaluates it over numbers, arrays, tensors or
symbols, and mutates it for use inside an outer evolutionary search.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .core import *  # noqa: F401,F403
from .evolution import *  # noqa: F401,F403
from .generation import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403

# Expose configuration presets as top-level names
from .config import PRESET_MINIMAL, PRESET_RESEARCH, PRESET_STANDARD  # noqa: F401
