"""
Error taxonomy for the simulation core.
NO UI DEPENDENCIES.
"""


class TowerDefenseError(Exception):
    """Base class for all gameplay errors."""


class ConfigurationError(TowerDefenseError):
    """The catalogs supplied at start-up cannot run a game."""


class InsufficientResources(TowerDefenseError):
    """
    A tower placement was refused because the player cannot afford it.
    Recoverable: game state is left untouched.
    """

    def __init__(self, cost: int, available: int):
        super().__init__(f"Tower costs {cost} but only {available} resources available")
        self.cost = cost
        self.available = available


class UnknownTowerType(TowerDefenseError):
    """A placement command referenced a tower type index outside the catalog."""

    def __init__(self, index: int, catalog_size: int):
        super().__init__(f"No tower type at index {index} (catalog has {catalog_size})")
        self.index = index
        self.catalog_size = catalog_size
