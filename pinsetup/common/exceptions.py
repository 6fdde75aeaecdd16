class PinSetupError(Exception):
    """ Base class for the errors that terminate a pinsetup invocation """
    ...


class UsageError(PinSetupError):
    """
    Raised when the command line cannot be interpreted: unknown flags, flags without a value or
    no pin operation requested at all.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(PinSetupError):
    """ Raised when the settings file cannot be loaded """
    ...


class BoardProfileError(ConfigurationError):
    """ Raised when a board profile cannot be found or is not valid """
    def __init__(self, profile: str, reason: str):
        self.profile = profile
        self.reason = reason
        super().__init__(f"Invalid board profile '{profile}': {reason}")
