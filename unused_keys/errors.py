class UnusedKeysError(Exception):
    """Base error for fatal conditions raised by the scanner."""


class KeyTableReadError(UnusedKeysError):
    pass


class KeyTableParseError(UnusedKeysError):
    pass


class KeyTableWriteError(UnusedKeysError):
    pass


class RootDirError(UnusedKeysError):
    pass
