import sys
import logging

from .errors import ReadError

USAGE = '''dopl [-v] FILE
dopl [-v] batch FOLDER...

Check a DOPL program and print "ok" or "error".'''


def main(argv=None):

    args = list(sys.argv[1:] if argv is None else argv)

    if '-h' in args:
        print(USAGE)
        return 0

    if '-v' in args:
        args.remove('-v')
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    from .parse import Parser
    from .preprocess import SourceReader

    reader = SourceReader()

    if args and args[0] == 'batch':

        if len(args) == 1:
            print('Error: No input folders', file=sys.stderr)
            return 2

        from . import debug
        try:
            debug.check_many(args[1:], reader=reader)
        except ReadError as e:
            print(e, file=sys.stderr)
            return 1
        return 0

    if len(args) != 1:
        print('Usage: ' + USAGE.splitlines()[0], file=sys.stderr)
        return 2

    filename = args[0]
    if not filename.endswith(reader.suffix):
        print('Unrecognised file type: %s' % filename, file=sys.stderr)
        return 2

    try:
        verdict = Parser().check_file(filename, reader)
    except ReadError as e:
        print('Exception parsing: %s' % filename, file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    print(verdict)
    return 0


if __name__ == '__main__':
    sys.exit(main())
