
class OptionError(Exception):
    pass


class InvalidArgumentError(OptionError, ValueError):
    pass


class NoneError(OptionError, LookupError):
    def __init__(self, message: str="no value present"):
        super(NoneError, self).__init__(message)


__all__ = ["OptionError", "InvalidArgumentError", "NoneError"]
