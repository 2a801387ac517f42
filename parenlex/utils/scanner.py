from dataclasses import dataclass, field
from bisect import bisect_right


@dataclass
class SourceCode:
    filename: str
    text: str
    _line_starts: list = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._line_starts = [0]
        for offset, char in enumerate(self.text):
            if char == '\n':
                self._line_starts.append(offset + 1)

    @classmethod
    def from_file(cls, filename):
        with open(filename, encoding='utf-8', newline='') as file:
            return cls(filename, file.read())

    @classmethod
    def from_string(cls, string, filename='<string>'):
        return cls(filename, string)

    @property
    def lines(self):
        # Text is read with newline='', so CRLF lines end in \r
        return [line.removesuffix('\r') for line in self.text.split('\n')]

    def locate(self, offset):
        line = bisect_right(self._line_starts, offset) - 1
        return Cursor(offset, line, offset - self._line_starts[line])

    def __getitem__(self, item):
        return self.text[item]

    def __len__(self):
        return len(self.text)


@dataclass
class Scanner:
    source: SourceCode
    pos: int = 0

    # Python strings index by code point, so a cursor step is always one
    # whole character no matter how it was encoded on disk.
    def peek(self):
        if self:
            return self.source[self.pos]
        return None

    def take(self, predicate):
        char = self.peek()
        if char is not None and predicate(char):
            self.pos += 1
            return char
        return None

    def take_while(self, predicate):
        start = self.pos
        while self and predicate(self.source[self.pos]):
            self.pos += 1
        return self.source[start:self.pos]

    def span_from(self, start):
        return Span(self.source.locate(start), self.cursor)

    @property
    def cursor(self):
        return self.source.locate(self.pos)

    def __bool__(self):
        # Is there any more to read?
        return self.pos < len(self.source)

    def __repr__(self):
        return f'<Scanner @{self.pos} {self.source[self.pos:self.pos+20]!r}>'


@dataclass(frozen=True, order=True)
class Cursor:
    offset: int
    line: int = field(compare=False)
    col: int = field(compare=False)

    @property
    def start(self):
        return self

    @property
    def end(self):
        return self

    def __str__(self):
        return f'{self.line + 1}:{self.col + 1}'


@dataclass(frozen=True)
class Span:
    start: Cursor
    end: Cursor

