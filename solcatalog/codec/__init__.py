from .text_codec import (
    DecoderState,
    TextDecoder,
    check_encodable_name,
    decode,
    encode,
    encode_solar_system,
    iter_decode,
    parse_record,
)

__all__ = [
    "DecoderState",
    "TextDecoder",
    "decode",
    "iter_decode",
    "encode",
    "encode_solar_system",
    "parse_record",
    "check_encodable_name",
]
