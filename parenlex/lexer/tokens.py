import enum
import dataclasses as dc


class Token:
    pass


@dc.dataclass(frozen=True)
class NumberToken(Token):
    data: int

    def __str__(self):
        return str(self.data)


@dc.dataclass(frozen=True)
class WordToken(Token):
    data: str

    def __str__(self):
        return self.data


@dc.dataclass(frozen=True)
class StringToken(Token):
    data: str

    def __str__(self):
        return f'"{self.data}"'


class Paren(Token, enum.Enum):
    # Same trick as any enum with a mixin: set _value_ ourselves so
    # members behave the same on 3.10 and 3.11+
    def __new__(cls, val):
        member = Token.__new__(cls)
        member._value_ = val
        return member

    OPEN = '('
    CLOSE = ')'

    @property
    def pair(self):
        return Paren.CLOSE if self is Paren.OPEN else Paren.OPEN

    def __str__(self):
        return self.value


def render(tokens):
    """Turn tokens back into source text that lexes to the same tokens."""
    return ' '.join(map(str, tokens))
