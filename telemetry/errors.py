# telemetry/errors.py


class ConfigurationError(ValueError):
    """Raised at startup when a dashboard setting is invalid."""
