import os


class Raw2HeaderError(Exception):
    message = 'failed to generate header'
    show_usage = False

    def __init__(self, message=None):
        super().__init__(message or self.message)


# Argument errors. All of these print the usage text.
class ArgumentError(Raw2HeaderError):
    message = 'invalid arguments'
    show_usage = True


class HelpRequested(ArgumentError):
    message = 'help requested'


class InvalidFlag(ArgumentError):
    def __init__(self, flag, message=None):
        self.flag = flag
        super().__init__(message or f"invalid flag '{flag}'")


class InvalidPaddingValue(InvalidFlag):
    def __init__(self, flag):
        super().__init__(flag, f"invalid padding value in '{flag}' (expected 00..FF)")


class MissingArguments(ArgumentError):
    message = 'expected <input_file> <output_file> <varname>'


class PaddingRequiresWordMode(ArgumentError):
    message = '--pad requires -16 or -b16'


class OddLengthWithoutPadding(Raw2HeaderError):
    message = 'uint16_t modes require an even sized file'
    show_usage = True


# Input side
class InputError(Raw2HeaderError):
    message = 'could not read input file'


class InvalidInputPath(InputError):
    message = 'invalid input filename'


class FileNotFound(InputError):
    pass


class ReadFailure(InputError):
    pass


class EmptyInput(InputError):
    message = 'empty file, nothing to do'


class AllocationFailure(InputError):
    pass


# Output side
class OutputError(Raw2HeaderError):
    message = 'could not write output file'


class WriteFailure(OutputError):
    pass


class CloseFailure(OutputError):
    pass


def WrapSystemError(cls, context, path, error):
    # e.g. "failed to open input file 'x.bin': No such file or directory"
    if error.errno:
        reason = error.strerror or os.strerror(error.errno)
    else:
        reason = str(error)
    if path is not None:
        return cls(f"failed to {context} '{path}': {reason}")
    return cls(f"failed to {context}: {reason}")
