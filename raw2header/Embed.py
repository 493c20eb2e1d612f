import io

from raw2header.Errors import EmptyInput
from raw2header.Errors import InvalidPaddingValue
from raw2header.Errors import OddLengthWithoutPadding
from raw2header.Errors import PaddingRequiresWordMode

NUM_COLUMNS = 8


def HeaderName(varname):
    # ASCII letters only
    return ''.join(c.upper() if c.isascii() else c for c in varname)


def ApplyPadding(config, data):
    """Return the buffer to encode: padded by one byte when a word-mode input has odd length."""
    if config.padding is not None:
        if not config.wordmode:
            raise PaddingRequiresWordMode()
        if not 0 <= config.padding <= 0xFF:
            raise InvalidPaddingValue(f"--pad={config.padding:#x}")

    if not config.wordmode or len(data) % 2 == 0:
        return bytes(data)

    if config.padding is None:
        raise OddLengthWithoutPadding()

    # Pad odd byte counts to form complete uint16_t pairs
    return bytes(data) + bytes([config.padding])


def FormatElement(config, data, i):
    if not config.wordmode:
        return f"0x{data[i]:02X}"
    if config.bigendian:
        return f"0x{data[i]:02X}{data[i + 1]:02X}"
    return f"0x{data[i + 1]:02X}{data[i]:02X}"


def WriteHeaderStart(o, config, headerName, tableSize):
    o.write(f"#ifndef _{headerName}_H\n")
    o.write(f"#define _{headerName}_H\n\n")
    if config.wordmode:
        byteOrder = 'BIG_ENDIAN' if config.bigendian else 'LITTLE_ENDIAN'
        o.write(f"#define {headerName}_{byteOrder}\n")
    o.write("#include <stdint.h>\n\n")
    if config.channel_tag.value is not None:
        o.write(f"#define {headerName}_PB_FMT Mode_{config.channel_tag.value}\n")

    elementCount = tableSize // 2 if config.wordmode else tableSize
    o.write(f"#define {headerName}_SZ {elementCount}\n\n")


def GenerateHeader(config, varname, data):
    """
    Render `data` as a C header declaring `const uint8_t varname[]`, or
    `const uint16_t varname[]` in word mode. Padding must already be applied.
    """
    tableSize = len(data)
    if tableSize == 0:
        raise EmptyInput()
    if config.wordmode and tableSize % 2 != 0:
        raise OddLengthWithoutPadding()

    headerName = HeaderName(varname)
    step = 2 if config.wordmode else 1
    last = tableSize - step

    o = io.StringIO()
    WriteHeaderStart(o, config, headerName, tableSize)

    elementType = 'uint16_t' if config.wordmode else 'uint8_t'
    o.write(f"const {elementType} {varname}[ {headerName}_SZ ] =\n{{\n")

    for element in range(0, tableSize, step):
        column = (element // step) % NUM_COLUMNS

        # Indent the start of each line
        if column == 0:
            o.write(' ')

        o.write(f" {FormatElement(config, data, element)}")

        if element < last:
            o.write(',')

        if column == NUM_COLUMNS - 1:
            o.write('\n')

    o.write('\n};\n\n')
    o.write(f"#endif // End of _{headerName}_H\n")
    return o.getvalue()
