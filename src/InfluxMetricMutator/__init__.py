"""InfluxMetricMutator package exports."""

__version__ = "0.1.0"

from .mutator import __all__ as _mutator_all  # noqa: E402
from .mutator import *  # noqa: E402,F401,F403

__all__ = [
    "__version__",
    *_mutator_all,
]
