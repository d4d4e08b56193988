"""Exception hierarchy for README generation."""


class ReadmeGenError(Exception):
    """Base class for all errors surfaced to the user."""


class ValidationError(ReadmeGenError):
    """Malformed or missing user input, detected before any network call."""


class RepositoryNotFound(ReadmeGenError):
    """The primary repository lookup returned a non-success status."""


class RepositoryFetchError(ReadmeGenError):
    """A network-level failure while fetching repository details."""


class GenerationFailed(ReadmeGenError):
    """The generative API returned a non-success status or was unreachable."""


class InvalidGenerationResponse(ReadmeGenError):
    """The generative API answered, but not with the expected shape."""


class ConfigurationError(ReadmeGenError):
    """A required configuration value is missing."""
