import contextlib
import os
import sys

from colorama import Back
from colorama import Style

from raw2header.Errors import AllocationFailure
from raw2header.Errors import CloseFailure
from raw2header.Errors import EmptyInput
from raw2header.Errors import FileNotFound
from raw2header.Errors import InvalidInputPath
from raw2header.Errors import ReadFailure
from raw2header.Errors import WrapSystemError
from raw2header.Errors import WriteFailure

NO_COLOR = os.environ.get('NO_COLOR')


def Colored(back, text):
    if NO_COLOR:
        return text
    return f"{Style.BRIGHT}{back}{text}{Style.RESET_ALL}"


def PrintSuccess(text):
    print(Colored(Back.GREEN, text))


def PrintWarning(text):
    print(Colored(Back.YELLOW, text))


def PrintError(text):
    print(Colored(Back.RED, f"Error: {text}"), file=sys.stderr)


def GetFileSize(filepath):
    try:
        return os.stat(filepath).st_size
    except FileNotFoundError as e:
        raise WrapSystemError(FileNotFound, 'open input file', filepath, e) from e
    except OSError as e:
        raise WrapSystemError(ReadFailure, 'tell input file size', filepath, e) from e


def ReadRawFile(filepath):
    if not filepath:
        raise InvalidInputPath()

    print(f"IF: {filepath}.  ", end='')
    tableSize = GetFileSize(filepath)
    if tableSize <= 0:
        raise EmptyInput()
    print(f"Size of input file: {tableSize}")

    try:
        with open(filepath, 'rb') as f:
            data = f.read(tableSize)
    except MemoryError as e:
        raise AllocationFailure(f"failed to allocate {tableSize} bytes") from e
    except FileNotFoundError as e:
        raise WrapSystemError(FileNotFound, 'open input file', filepath, e) from e
    except OSError as e:
        raise WrapSystemError(ReadFailure, 'read input file', filepath, e) from e

    # NOTE: the file may have been truncated between stat() and read()
    if len(data) != tableSize:
        raise ReadFailure(f"failed to read input file '{filepath}': expected {tableSize} bytes, got {len(data)}")
    return data


def WriteHeaderFile(filepath, text):
    """Write the header text and return the number of bytes written."""
    print(f"OF: {filepath}")
    content = text.encode('utf-8')

    try:
        o = open(filepath, 'wb')
    except OSError as e:
        raise WrapSystemError(WriteFailure, 'open output file', filepath, e) from e

    try:
        o.write(content)
        o.flush()
        outputSize = o.tell()
    except OSError as e:
        # The write error is the one reported
        with contextlib.suppress(OSError):
            o.close()
        raise WrapSystemError(WriteFailure, 'write output file', filepath, e) from e

    try:
        o.close()
    except OSError as e:
        raise WrapSystemError(CloseFailure, 'close output file', filepath, e) from e

    print(f"Size of output file: {outputSize}")
    return outputSize
