"""Exception types raised by nl-shell."""


class NLShellError(Exception):
    """Base class for errors that end startup or the session."""


class ConfigError(NLShellError):
    """The configuration file could not be read or is malformed."""


class StartupError(NLShellError):
    """The environment could not be probed to build the session context."""


class UnsupportedShellError(NLShellError):
    """The user's shell has no known native history file."""


class ModelError(NLShellError):
    """A model backend could not be built or failed to answer."""


class DirectoryChangeError(NLShellError):
    """The shell process could not follow a `cd` into its target directory."""

    def __init__(self, target: str, reason: str):
        super().__init__(f"cannot change directory to {target}: {reason}")
        self.target = target
        self.reason = reason
