"""Exception types shared across the package."""


class MorpionError(Exception):
    pass


class IllegalBoardError(MorpionError, ValueError):
    """Both markers own a full line; no legal game reaches such a grid."""


class NoMoveAvailableError(MorpionError, ValueError):
    pass


class ConfigError(MorpionError, ValueError):
    pass
