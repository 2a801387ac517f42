from parenlex.lexer import lex, SourceCode
from parenlex.errors import CompilerError
import sys

def main(filename):
    source = SourceCode.from_file(filename)
    try:
        for tok in lex(source):
            print(repr(tok))
    except CompilerError as err:
        print(err.get_info(source), file=sys.stderr)
        return 1

if __name__ == '__main__':
    sys.exit(main(sys.argv[1]))
