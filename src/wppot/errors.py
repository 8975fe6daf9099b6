class WpPotError(Exception):
    pass


class ConfigurationError(WpPotError):
    """Raised when the options passed to the generator can't be used."""
