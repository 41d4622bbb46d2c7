"""Exception types raised by api-doc-agent."""


class ApiDocAgentError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(ApiDocAgentError):
    """Invalid provider, missing API key or unsupported output format."""


class DiscoveryError(ApiDocAgentError):
    """The route directory could not be read."""


class EnrichmentError(ApiDocAgentError):
    """A provider could not describe a single route method."""
