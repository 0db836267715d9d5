from enum import IntEnum

from fpal.parsers.parsers import ParseError


class ECode(IntEnum):
    """ Error codes for command termination

    Based on linux '/usr/include/sysexits.h'
    Except for usage errors which are 2, in keeping with argparse.
    """

    OK = 0
    ERROR = 1  # Generic error, avoid using if possible
    USAGE = 2  # command line usage error
    DATAERR = 65  # data format error
    NOINPUT = 66  # cannot open input
    SOFTWARE = 70  # internal software error
    IOERR = 74  # input/output error
    CONFIG = 78  # configuration error
    SIGINT = 130  # Ctrl-c


class FPException(Exception):

    ecode: ECode = ECode.ERROR

    def __init__(self, msg: str) -> None:
        self.msg = msg
        return

    def __str__(self) -> str:
        return self.msg


class FPCLIError(FPException):

    ecode = ECode.USAGE


class FPParseError(FPException):

    ecode = ECode.DATAERR

    def __init__(self, error: ParseError) -> None:
        self.error = error
        self.msg = str(error)
        return
