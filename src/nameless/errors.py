## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark


class LambdaError(Exception):
    def __init__(self, message: str = "", *, info=None):
        """Base class for all errors raised by the calculi."""
        super().__init__(message)
        self.info = info

class LambdaParseError(LambdaError):
    def __init__(self, message, *, filename=None, line=None, column=None, token=None):
        super().__init__(message)
        self.filename = filename
        self.line = line
        self.column = column
        self.token = token

class LambdaIncompleteParse(LambdaParseError, lark.exceptions.ParseError):
    def __init__(self, message, *, filename=None, line=None, column=None, token=None):
        super().__init__(message, filename=filename, line=line, column=column, token=token)

class LambdaNameError(LambdaError, NameError):
    """Unbound identifier found while removing names."""
    def __init__(self, message: str = "", *, name: str = None, info=None):
        super().__init__(message, info=info)
        self.name = name

class LambdaTypeError(LambdaError, TypeError):
    """Term rejected by the type checker, `reason` without the position suffix."""
    def __init__(self, message: str = "", *, reason: str = None, info=None):
        super().__init__(message, info=info)
        self.reason = reason or message


class LambdaInternalError(LambdaError, RuntimeError):
    """Broken invariant of the nameless representation; always a bug, never user input."""
    pass
