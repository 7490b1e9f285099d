class EcsSdError(Exception):
    """Base exception for ecssd."""

    pass


class ConfigError(EcsSdError):
    """Raised when the environment configuration is missing or malformed."""

    pass


class FatalError(EcsSdError):
    """Errors that must stop the process, not just the current run."""

    pass


class PublishError(FatalError):
    """Raised when the file_sd document cannot be serialized or written."""

    pass
