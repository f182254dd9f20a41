"""Domain layer for rewardnet application."""

# Services are imported lazily: they depend on rewardnet.database, which in
# turn imports the domain entities.
_SERVICES = {
    "RewardNetwork": "rewardnet.domain.reward",
    "RewardService": "rewardnet.domain.reward",
    "AccountService": "rewardnet.domain.account",
    "RestaurantService": "rewardnet.domain.restaurant",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
