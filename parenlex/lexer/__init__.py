from . import tokens
from . import readers
from .tokens import Token, Paren, NumberToken, WordToken, StringToken, render
from parenlex.utils.scanner import Scanner, SourceCode
from parenlex.errors import LexerError, InvalidCharacterError

import functools
import logging

logger = logging.getLogger(__name__)


def lex(source, *, strict=False):
    if isinstance(source, str):
        source = SourceCode.from_string(source)

    # Order matters: it decides which category wins if a character
    # ever belongs to more than one.
    tok_readers = [
        readers.read_paren_token, readers.skip_whitespace,
        readers.read_number_token, readers.read_word_token,
        functools.partial(readers.read_string_token, strict=strict)
    ]

    scan = Scanner(source)
    result = []

    try:
        while scan:
            for reader in tok_readers:
                tok = reader(scan)
                if tok is not None:
                    if isinstance(tok, Token):
                        result.append(tok)
                    break
            else:
                raise InvalidCharacterError(scan.peek(), scan.cursor)
    except LexerError as err:
        err.tokens = result
        raise

    logger.debug('Lexed %d tokens from %s', len(result), source.filename)
    return result
