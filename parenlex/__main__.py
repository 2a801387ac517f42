from parenlex.lexer import lex, render, SourceCode
from parenlex.errors import CompilerError
import argparse
import logging
import sys


parenlex = argparse.ArgumentParser(
    description='parenlex splits Lisp-like source into tokens',
    prog='parenlex'
)

parenlex.add_argument(
    'input', nargs='?',
    help='The source file to lex'
)

parenlex.add_argument(
    '-c', metavar='TEXT', dest='text',
    help='lex TEXT instead of reading a file'
)

parenlex.add_argument(
    '--repl', help='lex standard input one line at a time',
    action='store_true'
)

parenlex.add_argument(
    '--strict', help='treat an unclosed string literal as an error',
    action='store_true'
)

parenlex.add_argument(
    '--render', help='print the tokens back as source rather than one per line',
    action='store_true'
)

parenlex.add_argument(
    '-v', '--verbose', help='enable debug logging',
    action='store_true'
)


def show(tokens, as_source):
    if as_source:
        print(render(tokens))
    else:
        for tok in tokens:
            print(repr(tok))


def repl(args):
    status = 0
    for lineno, line in enumerate(sys.stdin, 1):
        source = SourceCode.from_string(line.removesuffix('\n'), f'<stdin:{lineno}>')
        try:
            show(lex(source, strict=args.strict), args.render)
        except CompilerError as err:
            # Keep going, a bad line shouldn't end the session
            print(err.get_info(source), file=sys.stderr)
            status = 1
    return status


def main(argv=None):
    args = parenlex.parse_args(argv)
    if [args.input is not None, args.text is not None, args.repl].count(True) != 1:
        parenlex.error('give exactly one of an input file, -c TEXT or --repl')

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(levelname)s: %(message)s'
    )

    if args.repl:
        return repl(args)

    if args.text is not None:
        source = SourceCode.from_string(args.text)
    else:
        try:
            source = SourceCode.from_file(args.input)
        except (OSError, UnicodeDecodeError) as err:
            parenlex.error(str(err))

    try:
        show(lex(source, strict=args.strict), args.render)
    except CompilerError as err:
        print(err.get_info(source), file=sys.stderr)
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
