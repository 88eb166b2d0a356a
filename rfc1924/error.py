class Base85Error(Exception):
    pass


class InvalidSymbol(Base85Error, ValueError):
    def __init__(self, symbol: int, offset: int):
        super().__init__(f"invalid symbol {chr(symbol)!r} at offset {offset}")
        self.symbol = symbol
        self.offset = offset
