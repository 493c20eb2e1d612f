import re

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from raw2header.Errors import HelpRequested
from raw2header.Errors import InvalidFlag
from raw2header.Errors import InvalidPaddingValue
from raw2header.Errors import MissingArguments
from raw2header.Errors import PaddingRequiresWordMode

PAD_PREFIX = '--pad='
PAD_VALUE_PATTERN = re.compile(r'(0[xX])?[0-9A-Fa-f]+')


class WordWidth(Enum):
    BYTE = 8
    WORD = 16


class Endianness(Enum):
    LITTLE = 'little'
    BIG = 'big'


class ChannelTag(Enum):
    NONE = None
    MONO = 'mono'
    STEREO = 'stereo'


@dataclass(frozen=True)
class EncodingConfig:
    word_width: WordWidth = WordWidth.BYTE
    endianness: Endianness = Endianness.LITTLE
    channel_tag: ChannelTag = ChannelTag.NONE
    padding: Optional[int] = None

    @property
    def wordmode(self):
        return self.word_width is WordWidth.WORD

    @property
    def bigendian(self):
        return self.endianness is Endianness.BIG


@dataclass(frozen=True)
class ParsedArguments:
    config: EncodingConfig
    input_path: str
    output_path: str
    symbol_name: str


# Whole-token flags. Each entry maps to the config fields it overwrites.
OPTIONS = {
    '-16':      {'word_width': WordWidth.WORD, 'endianness': Endianness.LITTLE},
    '-b16':     {'word_width': WordWidth.WORD, 'endianness': Endianness.BIG},
    '--mono':   {'channel_tag': ChannelTag.MONO},
    '-m':       {'channel_tag': ChannelTag.MONO},
    '--stereo': {'channel_tag': ChannelTag.STEREO},
    '-s':       {'channel_tag': ChannelTag.STEREO},
}

HELP_FLAGS = ('-h', '--help')

SHORT_FLAGS = {
    'm': {'channel_tag': ChannelTag.MONO},
    's': {'channel_tag': ChannelTag.STEREO},
}


def ParsePadFlag(arg):
    padText = arg[len(PAD_PREFIX):]
    if not PAD_VALUE_PATTERN.fullmatch(padText):
        raise InvalidPaddingValue(arg)

    pad = int(padText, 16)
    if pad > 0xFF:
        raise InvalidPaddingValue(arg)
    return pad


def IsCombinedShortFlags(arg):
    # -16 and -b16 are long enough to look combined, so they are excluded first
    if arg in ('-16', '-b16'):
        return False
    return not arg.startswith('--') and len(arg) > 2


def ParseCombinedShortFlags(arg, config):
    """Apply a token like -ms one letter at a time. Later letters win."""
    for flag in arg[1:]:
        if flag == 'h':
            raise HelpRequested()
        if flag not in SHORT_FLAGS:
            raise InvalidFlag(arg)
        config = replace(config, **SHORT_FLAGS[flag])
    return config


def ParseArgs(argv):
    """
    Resolve command-line tokens (program name excluded) into ParsedArguments.

    Flags come first, in any order, followed by <input_file> <output_file> <varname>.
    Conflicting flags are not an error: the last one wins. Tokens after the
    three positionals are ignored.

    Raises HelpRequested, InvalidFlag, InvalidPaddingValue, MissingArguments
    or PaddingRequiresWordMode.
    """
    config = EncodingConfig()
    tokens = list(argv)
    i = 0

    # Consume leading flags before positional args
    while i < len(tokens) and tokens[i].startswith('-'):
        arg = tokens[i]
        i += 1

        if arg.startswith(PAD_PREFIX):
            config = replace(config, padding=ParsePadFlag(arg))
            continue

        if IsCombinedShortFlags(arg):
            config = ParseCombinedShortFlags(arg, config)
            continue

        if arg in HELP_FLAGS:
            raise HelpRequested()

        if arg not in OPTIONS:
            raise InvalidFlag(arg)
        config = replace(config, **OPTIONS[arg])

    if len(tokens) - i < 3:
        raise MissingArguments()

    if config.padding is not None and not config.wordmode:
        raise PaddingRequiresWordMode()

    inputFile, outputFile, varname = tokens[i:i + 3]
    return ParsedArguments(config, inputFile, outputFile, varname)
