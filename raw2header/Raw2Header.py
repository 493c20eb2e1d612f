import sys

import colorama

from raw2header import Embed
from raw2header import Options
from raw2header import Utils
from raw2header.Errors import HelpRequested
from raw2header.Errors import Raw2HeaderError

RAW2HEADER_VERSION = '2.01.0'


def PrintUsage():
    print(f"\nraw2header file convertion utility V{RAW2HEADER_VERSION}\n")
    print("Takes the input file and converts it to a header file.\n")
    print("Usage: raw2header [--mono|-m|--stereo|-s] [-16/-b16] [--pad=NN] <input_file> <output_file> <varname>")
    print("where -b16 generate a big-endian uint16_t and -16 generates a")
    print("little endian uint16_t array.\n")
    print("--pad=NN or --pad=0xNN appends one byte for odd sized files.\n")
    print("--mono/-m or --stereo/-s emits a mode define in the output header.\n")
    print("Short flags may be combined, e.g. -ms.\n")
    print("uint16_t arrays require an even sized file.\n")


def Convert(args):
    print("Processing")
    data = Utils.ReadRawFile(args.input_path)

    padded = Embed.ApplyPadding(args.config, data)
    if len(padded) != len(data):
        Utils.PrintWarning(f"Padding odd sized file with 0x{args.config.padding:02X}")

    text = Embed.GenerateHeader(args.config, args.symbol_name, padded)
    Utils.WriteHeaderFile(args.output_path, text)


def Run(argv):
    try:
        Convert(Options.ParseArgs(argv))
    except Raw2HeaderError as e:
        if not isinstance(e, HelpRequested):
            Utils.PrintError(e)
        if e.show_usage:
            PrintUsage()
        return 1

    Utils.PrintSuccess("Header file completed successfully")
    return 0


def Main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    # init() on entry, deinit() on exit, so repeated calls don't stack stream wrappers
    with colorama.colorama_text():
        return Run(argv)


if __name__ == '__main__':
    sys.exit(Main())
