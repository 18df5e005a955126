""" Lexer.
"""

import logging

from .errors import LexError

from .grammar.keywords import KeywordLoc, SepLoc
from .grammar.basic_types import is_int_literal

from .tokens import Token, TokenType
from .util.ioutil import LineReader

logger = logging.getLogger(__name__)


class Lexer:

    """
    Token table:

    ws:       any whitespace outside a literal
    keyword:  start finish integer character logical if then else endif
              print loopif do endloop
    int:      [0-9]+
    char:     "[^"]*"         (a single line)
    operator: \\.[^.\\s]*\\.   (a single line)
    sep:      , ; ( )
    assign:   <-
    name:     everything else

    Lexical errors do not stop scanning; they are collected in `errors`
    and the parser must refuse to start if there is any.
    """

    def __init__(self):
        self.reader = None
        self.tokens = []
        self.errors = []
        self.token_str = ''
        self.in_quotes = False
        self.in_operator = False

    def clear(self):
        self.reader = None
        self.tokens = []
        self.errors = []
        self.token_str = ''
        self.in_quotes = self.in_operator = False

    def load(self, ifile):
        """ Load an input.
            Args:
            --
            ifile: the whole text (string), or an iterable of lines
        """
        self.clear()
        self.reader = LineReader(ifile)

    @property
    def error(self):
        return len(self.errors) > 0

    def scan(self, ifile=None):
        """ Split all the loaded lines into tokens.
            Returns the token list (without EOF).
        """
        if ifile is not None:
            self.load(ifile)

        while not self.reader.eof():
            self.scan_line(self.reader.line())
            self.reader.forward()

        logger.debug('Scanned %d tokens, %d lexical errors', len(self.tokens), len(self.errors))
        return self.tokens

    def scan_line(self, line):
        """ Scan one line. The token buffer never survives the line end.
        """
        self.token_str = ''
        i = 0
        while i < len(line):
            c = line[i]

            if self.in_quotes:
                self.token_str += c
                if c == '"':
                    self.in_quotes = False
                    self.emit(TokenType.CHAR)

            elif self.in_operator:
                if c == '.':
                    self.token_str += c
                    self.in_operator = False
                    self.emit(TokenType.OP)
                elif c.isspace():
                    self.fail('Whitespace inside operator %s' % self.token_str)
                    self.in_operator = False
                    self.token_str = ''
                else:
                    self.token_str += c

            elif c.isspace():
                self.flush()

            elif c == '.':
                self.flush()
                self.token_str = c
                self.in_operator = True

            elif c == '"':
                self.flush()
                self.token_str = c
                self.in_quotes = True

            elif c in SepLoc:
                self.flush()
                self.tokens.append(Token(TokenType.SEP, c))

            elif c == '<':
                self.flush()
                if line[i + 1:i + 2] == '-':
                    self.tokens.append(Token(TokenType.ASN, '<-'))
                    i += 1
                else:
                    self.fail('"<" not followed by "-"')

            else:
                self.token_str += c

            i += 1

        # line end
        if self.in_quotes:
            self.fail('Unterminated literal %s' % self.token_str)
        elif self.in_operator:
            self.fail('Unterminated operator %s' % self.token_str)
        else:
            self.flush()

        self.in_quotes = self.in_operator = False
        self.token_str = ''

    def flush(self):
        """ Turn the pending word (if any) into a token.
        """
        if not self.token_str:
            return

        if self.token_str in KeywordLoc:
            self.emit(TokenType.KEYWORD)
        elif is_int_literal(self.token_str):
            self.emit(TokenType.INT)
        else:
            self.emit(TokenType.NAME)

    def emit(self, tp):
        self.tokens.append(Token(tp, self.token_str))
        self.token_str = ''

    def fail(self, err):
        e = LexError(err, self.reader.pos() + 1 if self.reader else 0)
        logger.debug('%s', e)
        self.errors.append(e)


def tokenize(ifile):
    """ Scan `ifile`, raising the first lexical error if there is one.
    """
    lexer = Lexer()
    tokens = lexer.scan(ifile)
    if lexer.error:
        raise lexer.errors[0]
    return tokens
