class UnrecognizedFormatCodeError(Exception):
    """Raised when the byte following an escape code is not a known format code."""

    def __init__(self, code: int, message: str = None):
        self.code = code
        if message is None:
            message = f"Unknown format code: 0x{code:02X}"
        super().__init__(message)


class ConversionInputError(Exception):
    """Raised when the Notepad document cannot be opened for reading."""

    def __init__(self, file_path: str, message: str = None, *, cause: Exception = None):
        self.file_path = file_path
        if message is None:
            message = f"Failed to open input file: {file_path}"
        super().__init__(message)
        self.__cause__ = cause


class ConversionOutputError(Exception):
    """Raised when the converted document cannot be opened for writing."""

    def __init__(self, file_path: str, message: str = None, *, cause: Exception = None):
        self.file_path = file_path
        if message is None:
            message = f"Failed to open output file: {file_path}"
        super().__init__(message)
        self.__cause__ = cause
