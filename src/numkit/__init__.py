"""numkit: small numeric helpers for random draws, rounding and range checks."""

__version__ = "0.1.0"

from numkit.config.defaults import default_config as default_config
from numkit.config.schema import ConversionConfig as ConversionConfig
from numkit.config.schema import NumkitConfig as NumkitConfig
from numkit.config.schema import RandomConfig as RandomConfig
from numkit.config.schema import RoundingConfig as RoundingConfig
from numkit.core.conversion import INT_MAX as INT_MAX
from numkit.core.conversion import INT_MIN as INT_MIN
from numkit.core.conversion import float_to_int as float_to_int
from numkit.core.generators import random_float as random_float
from numkit.core.generators import random_int as random_int
from numkit.core.generators import random_int_not_in_blacklist as random_int_not_in_blacklist
from numkit.core.ranges import BoundType as BoundType
from numkit.core.ranges import in_range as in_range
from numkit.core.rng import RandomEngine as RandomEngine
from numkit.core.rng import configure_engine as configure_engine
from numkit.core.rng import get_random_engine as get_random_engine
from numkit.core.rng import reseed as reseed
from numkit.core.rounding import is_whole_number as is_whole_number
from numkit.core.rounding import round_half_away_from_zero as round_half_away_from_zero
from numkit.core.rounding import round_to_nearest_10th as round_to_nearest_10th
from numkit.core.rounding import round_to_precision as round_to_precision
from numkit.utils.exceptions import ConfigError as ConfigError
from numkit.utils.exceptions import InvalidArgumentError as InvalidArgumentError
from numkit.utils.exceptions import NumkitError as NumkitError
