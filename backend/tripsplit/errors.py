"""Errors raised by the ledger, settings and settlement core."""


class TripSplitError(Exception):
    """Base class. All of these are recoverable; the API reports them."""


class ValidationError(TripSplitError):
    """A submitted expense was rejected; the ledger is unchanged."""


class ConfigurationError(TripSplitError):
    """Bad exchange rate or participant set; previous settings are kept."""


class NotFoundError(TripSplitError):
    """Lookup of an unknown expense id. Deletion ignores unknown ids instead."""
