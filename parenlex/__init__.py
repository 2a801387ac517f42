from parenlex.lexer import lex
from parenlex.lexer.tokens import (
    Token, Paren, NumberToken, WordToken, StringToken, render
)
from parenlex.utils.scanner import SourceCode
from parenlex.errors import (
    CompilerError, LexerError, InvalidCharacterError, NumberOverflowError,
    UnterminatedStringError
)

__version__ = '0.1.0'
