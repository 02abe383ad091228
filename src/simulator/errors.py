"""Exceptions raised by the analytics simulator."""


class SimulationError(Exception):
    """Base class for simulator errors."""


class InvalidConfigError(SimulationError, ValueError):
    """A club or simulation setting is outside its allowed range."""


class InvalidReferenceDateError(SimulationError, TypeError):
    """The reference "today" is not a calendar date."""
