class CursorpackError(Exception):
    exit_code: int = 1

    def __init__(self, message: str):
        super().__init__(message)


class ConfigError(CursorpackError):
    pass


class UnsupportedTargetError(CursorpackError):
    pass


class MissingToolError(CursorpackError):
    pass


class TransportError(CursorpackError):
    pass


class BuildError(CursorpackError):
    pass


class ArchiveFormatError(BuildError):
    pass


class StructureError(BuildError):
    pass
