import dataclasses

import pytest

from raw2header.Errors import HelpRequested
from raw2header.Errors import InvalidFlag
from raw2header.Errors import InvalidPaddingValue
from raw2header.Errors import MissingArguments
from raw2header.Errors import PaddingRequiresWordMode
from raw2header.Options import ChannelTag
from raw2header.Options import Endianness
from raw2header.Options import ParseArgs
from raw2header.Options import ParsePadFlag
from raw2header.Options import WordWidth

POSITIONALS = ['in.raw', 'out.h', 'tbl']


def test_defaults():
    args = ParseArgs(POSITIONALS)
    assert args.input_path == 'in.raw'
    assert args.output_path == 'out.h'
    assert args.symbol_name == 'tbl'
    assert args.config.word_width is WordWidth.BYTE
    assert args.config.channel_tag is ChannelTag.NONE
    assert args.config.padding is None
    assert not args.config.wordmode


@pytest.mark.parametrize('flags, endianness', [
    (['-16'], Endianness.LITTLE),
    (['-b16'], Endianness.BIG),
    (['-16', '-b16'], Endianness.BIG),
    (['-b16', '-16'], Endianness.LITTLE),
])
def test_word_mode_last_flag_wins(flags, endianness):
    config = ParseArgs(flags + POSITIONALS).config
    assert config.word_width is WordWidth.WORD
    assert config.endianness is endianness


@pytest.mark.parametrize('flags, tag', [
    (['-m'], ChannelTag.MONO),
    (['--mono'], ChannelTag.MONO),
    (['-s'], ChannelTag.STEREO),
    (['--stereo'], ChannelTag.STEREO),
    (['--mono', '--stereo'], ChannelTag.STEREO),
    (['-s', '-m'], ChannelTag.MONO),
    (['-ms'], ChannelTag.STEREO),
    (['-sm'], ChannelTag.MONO),
    (['-mmm'], ChannelTag.MONO),
])
def test_channel_tag(flags, tag):
    assert ParseArgs(flags + POSITIONALS).config.channel_tag is tag


def test_flags_in_any_order():
    config = ParseArgs(['-s', '--pad=0x7f', '-b16'] + POSITIONALS).config
    assert config.channel_tag is ChannelTag.STEREO
    assert config.padding == 0x7F
    assert config.bigendian


@pytest.mark.parametrize('flags', [
    ['-h'],
    ['--help'],
    ['-mh'],
    ['-hx'],
    ['-16', '-h'],
])
def test_help(flags):
    with pytest.raises(HelpRequested):
        ParseArgs(flags + POSITIONALS)


def test_help_wins_over_missing_arguments():
    with pytest.raises(HelpRequested):
        ParseArgs(['--help'])


def test_help_stops_parsing():
    # the invalid flag after -h is never looked at
    with pytest.raises(HelpRequested):
        ParseArgs(['-h', '-x'] + POSITIONALS)


@pytest.mark.parametrize('flag', ['-x', '-', '--bogus', '-mx', '-16x', '--m', '-b', '-H'])
def test_invalid_flag(flag):
    with pytest.raises(InvalidFlag) as excinfo:
        ParseArgs([flag] + POSITIONALS)
    assert excinfo.value.flag == flag
    assert excinfo.value.show_usage


@pytest.mark.parametrize('arg, value', [
    ('--pad=AA', 0xAA),
    ('--pad=aa', 0xAA),
    ('--pad=0xAA', 0xAA),
    ('--pad=0X0f', 0x0F),
    ('--pad=0', 0),
    ('--pad=00FF', 0xFF),
])
def test_pad_flag(arg, value):
    assert ParsePadFlag(arg) == value


@pytest.mark.parametrize('arg', ['--pad=', '--pad=0x', '--pad=100', '--pad=zz', '--pad=-1', '--pad= 1', '--pad=1_0'])
def test_invalid_pad_value(arg):
    with pytest.raises(InvalidPaddingValue) as excinfo:
        ParseArgs(['-16', arg] + POSITIONALS)
    assert isinstance(excinfo.value, InvalidFlag)


def test_padding_requires_word_mode():
    with pytest.raises(PaddingRequiresWordMode):
        ParseArgs(['--pad=AA'] + POSITIONALS)


def test_padding_with_word_mode():
    assert ParseArgs(['--pad=AA', '-16'] + POSITIONALS).config.padding == 0xAA


@pytest.mark.parametrize('argv', [
    [],
    ['-16'],
    ['-ms', 'in.raw'],
    ['-16', 'in.raw', 'out.h'],
])
def test_missing_arguments(argv):
    with pytest.raises(MissingArguments):
        ParseArgs(argv)


def test_extra_positionals_ignored():
    args = ParseArgs(['-16'] + POSITIONALS + ['extra', '-b16'])
    assert args.symbol_name == 'tbl'
    assert args.config.endianness is Endianness.LITTLE


def test_flags_after_positionals_are_not_parsed():
    args = ParseArgs(['in.raw', '-16', 'tbl', 'x'])
    assert args.output_path == '-16'
    assert not args.config.wordmode


def test_no_state_between_calls():
    ParseArgs(['-b16', '-s', '--pad=11'] + POSITIONALS)
    config = ParseArgs(POSITIONALS).config
    assert config.word_width is WordWidth.BYTE
    assert config.endianness is Endianness.LITTLE
    assert config.channel_tag is ChannelTag.NONE
    assert config.padding is None


def test_parsed_arguments_are_immutable():
    args = ParseArgs(POSITIONALS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        args.symbol_name = 'other'
    with pytest.raises(dataclasses.FrozenInstanceError):
        args.config.padding = 1
