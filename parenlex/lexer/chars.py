import string

# str.isspace() and friends accept far more than ASCII, so the sets are
# spelled out.  Vertical tab is deliberately absent.
WHITESPACE = frozenset(' \t\n\f\r')
LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)


def is_letter(char):
    return char in LETTERS

def is_whitespace(char):
    return char in WHITESPACE

def is_number(char):
    return char in DIGITS

def is_open_paren(char):
    return char == '('

def is_close_paren(char):
    return char == ')'

def is_paren(char):
    return is_open_paren(char) or is_close_paren(char)

def is_quote(char):
    return char == '"'
