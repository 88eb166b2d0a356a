import struct

from typing import Union

from .alphabet import MAP_DECODE, MAP_ENCODE, PAD_SYMBOL
from .error import InvalidSymbol

BytesLike = Union[bytes, bytearray, memoryview]


def b85_encode(msg: Union[BytesLike, str]) -> str:
    """Encode a byte sequence as RFC1924 Base85 text."""
    if isinstance(msg, str):
        msg = msg.encode("utf-8")
    msg = bytes(msg)
    rem = len(msg) % 4
    if rem:
        msg += bytes(4 - rem)
    buf = bytearray(len(msg) * 5 // 4)
    idx = 4
    for (val,) in struct.iter_unpack(">L", msg):
        for _ in range(4):
            buf[idx] = MAP_ENCODE[val % 85]
            idx -= 1
            val //= 85
        buf[idx] = MAP_ENCODE[val]
        idx += 9
    if rem:
        # a chunk of n bytes keeps n + 1 symbols
        del buf[len(buf) - 4 + rem :]
    return buf.decode("ascii")


def b85_decode(msg: Union[BytesLike, str]) -> bytes:
    """
    Decode RFC1924 Base85 text.

    ASCII spaces are skipped; any other character outside the alphabet
    raises InvalidSymbol. A trailing group of k symbols is completed with
    the highest symbol and yields k - 1 bytes, so a lone trailing symbol
    yields nothing.
    """
    if isinstance(msg, str):
        msg = msg.encode("utf-8")
    msg = bytes(msg).replace(b" ", b"")
    rem = len(msg) % 5
    if rem:
        msg += PAD_SYMBOL * (5 - rem)
    buf = bytearray(len(msg) * 4 // 5)
    copy_to = 0
    idx = 0
    val = 0
    for (pos, char) in enumerate(msg):
        try:
            val += MAP_DECODE[char]
        except KeyError:
            raise InvalidSymbol(char, pos) from None
        idx += 1
        if idx == 5:
            copy_next = copy_to + 4
            buf[copy_to:copy_next] = (val & 0xFFFFFFFF).to_bytes(4, "big")
            copy_to = copy_next
            idx = 0
            val = 0
        else:
            val *= 85
    if rem:
        del buf[len(buf) - 5 + rem :]
    return bytes(buf)


encode = b85_encode
decode = b85_decode


if __name__ == "__main__":
    assert b85_encode(b"a") == "VE"
    assert b85_encode(b"aaaaa") == "VPRomVE"
    assert b85_decode("a%F63ZE192bZKvH") == b"relimitation"
    assert b85_decode("V_| k>Yh`6{ WpV") == b"cavekeeper"
