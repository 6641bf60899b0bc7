class GogoError(Exception):
    """Base class for every error gogo reports to the user.

    Each error maps to a process exit code; the CLI prints the message on a
    single line and returns the code instead of aborting.
    """

    exit_code = 1

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class GogoNotice(GogoError):
    """A requested transition was already in effect. Not a failure."""

    exit_code = 0


class ConfigNotFound(GogoError):
    pass


class ConfigAlreadyExists(GogoError):
    pass


class ConfigParseError(GogoError):
    pass


class MissingEnvironment(GogoError):
    pass


class ConfigurationError(GogoError):
    pass


class PasswordNotConfigured(GogoError):
    pass


class CorruptPasswordStore(GogoError):
    pass


class HostIdentityError(GogoError):
    pass


class AuthenticationFailure(GogoError):
    pass


class CommandNotFound(GogoError):
    exit_code = 127


class AlreadyEncrypted(GogoNotice):
    pass


class AlreadyPlaintext(GogoNotice):
    pass


class InvalidVariable(GogoError):
    pass
