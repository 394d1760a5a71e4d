"""Product lifecycle strategies: base class, registry, factory and handlers."""

# Import handlers to trigger @register_strategy decorators
from shelfwatch.services.strategies.expirable import ExpiredProductStrategy  # noqa: F401
from shelfwatch.services.strategies.factory import ProductStrategyFactory  # noqa: F401
from shelfwatch.services.strategies.normal import NormalProductStrategy  # noqa: F401
from shelfwatch.services.strategies.seasonal import SeasonalProductStrategy  # noqa: F401
