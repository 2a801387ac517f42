def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder

class CompilerError(Exception):
    def __init__(self, message, context):
        from parenlex.utils.scanner import Span, Cursor
        super().__init__(message)
        if isinstance(context, Span) or isinstance(context, Cursor):
            self.context = (context,)
        else:
            self.context = tuple(context)
        # Tokens lexed before the failure, filled in by lex() so that a
        # caller like the REPL can still show them
        self.tokens = []

    def get_info(self, source):
        message = source.filename
        if self.context:
            message += f':{self.context[-1].start}'
        message += f': {self}'

        lines = source.lines
        for span in self.context:
            # Mimic gcc error messages
            line = span.start.line
            message += f'\n{line + 1:5} | {lines[line]}'

        # last context entry is the focus -- show arrow there
        if self.context:
            focus = self.context[-1].start
            # Keep tabs so the caret lines up however wide they render
            padding = ''.join(
                '\t' if char == '\t' else ' '
                for char in lines[focus.line][:focus.col]
            )
            message += f'\n      | ' + padding + '^'

        return message


class LexerError(CompilerError):
    pass

class InvalidCharacterError(LexerError):
    def __init__(self, character, context):
        super().__init__(f'Invalid character: {character!r}', context)
        self.character = character

class NumberOverflowError(LexerError, OverflowError):
    def __init__(self, digits, context):
        super().__init__(f'Number literal out of range: {digits}', context)
        self.digits = digits

class UnterminatedStringError(LexerError):
    expected = _message('Unclosed string literal, expected {need}')
