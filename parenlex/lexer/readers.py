import logging

from parenlex.lexer import tokens
from parenlex.lexer.chars import (
    is_paren, is_whitespace, is_number, is_letter, is_quote
)
from parenlex.errors import NumberOverflowError, UnterminatedStringError

logger = logging.getLogger(__name__)

INT_MAX = 2**31 - 1
# Longer runs (ignoring leading zeros) overflow without being converted,
# which also stays clear of the int/str conversion digit limit
INT_MAX_DIGITS = len(str(INT_MAX))


def read_paren_token(scan):
    if char := scan.take(is_paren):
        return tokens.Paren(char)


def skip_whitespace(scan):
    if scan.take_while(is_whitespace):
        return True


def read_number_token(scan):
    start = scan.pos
    if not (digits := scan.take_while(is_number)):
        return

    significant = digits.lstrip('0') or '0'
    if len(significant) > INT_MAX_DIGITS or (value := int(significant)) > INT_MAX:
        raise NumberOverflowError(digits, scan.span_from(start))

    return tokens.NumberToken(value)


def read_word_token(scan):
    if word := scan.take_while(is_letter):
        return tokens.WordToken(word)


def read_string_token(scan, strict=False):
    if not scan.take(is_quote):
        return
    start = scan.pos - 1

    text = scan.take_while(lambda char: not is_quote(char))

    if not scan.take(is_quote):
        opened = scan.source.locate(start)
        if strict:
            raise UnterminatedStringError.expected(opened, need="'\"'")
        logger.debug('String opened at %s runs to end of input', opened)

    return tokens.StringToken(text)
