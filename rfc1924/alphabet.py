from typing import Optional, Union

# RFC1924: https://datatracker.ietf.org/doc/html/rfc1924

MAP_ENCODE = (
    b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    b"!#$%&()*+-;<=>?@^_`{|}~"
)
MAP_DECODE = {c: idx for (idx, c) in enumerate(MAP_ENCODE)}

# highest symbol, used to complete a trailing partial group
PAD_SYMBOL = MAP_ENCODE[-1:]


def value_to_char(value: int) -> str:
    if not 0 <= value < len(MAP_ENCODE):
        raise ValueError(f"value out of range: {value}")
    return chr(MAP_ENCODE[value])


def char_to_value(char: Union[str, int]) -> Optional[int]:
    """
    Look up the value of a single symbol.

    Accepts a one-character string or a byte value. Returns None for
    anything outside the alphabet.
    """
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        char = ord(char)
    return MAP_DECODE.get(char)
