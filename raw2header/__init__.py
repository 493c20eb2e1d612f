from raw2header.Embed import ApplyPadding, GenerateHeader, HeaderName
from raw2header.Options import ChannelTag, EncodingConfig, Endianness, ParseArgs, ParsedArguments, WordWidth
from raw2header.Raw2Header import Main, RAW2HEADER_VERSION

__version__ = RAW2HEADER_VERSION
