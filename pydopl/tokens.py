""" Tokens and the token stream read by the parser.
"""

from enum import Enum

from .errors import SynError


class TokenType(Enum):
    NONE = 0    # reserved
    KEYWORD = 1 # keyword (start, if, integer, ...)
    NAME = 2    # identifier
    INT = 3     # integer constant
    CHAR = 4    # quoted character constant
    OP = 5      # dotted operator (.plus., .not., ...)
    SEP = 6     # separator (, ; ( ))
    ASN = 7     # assignment (<-)
    EOF = 8     # EOF


class Token:
    """ Token object
    """

    def __init__(self, tp:TokenType, val:str):
        """ tp ===> Type
            val ===> Source text
        """
        self.tp = tp
        self.val = val

    def __repr__(self):
        return '<%s, %r>' % (self.tp.name, self.val)

    def __eq__(self, other):
        return isinstance(other, Token) and self.tp == other.tp and self.val == other.val

    def __hash__(self):
        return hash((self.tp, self.val))


EOF_TOKEN = Token(TokenType.EOF, '')


class TokenStream:
    """ Cursor over a scanned token list.
        Only one token of look ahead is ever needed; nothing is given back
        once taken by get_token().
    """

    def __init__(self, tokens):
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].tp != TokenType.EOF:
            self.tokens.append(EOF_TOKEN)
        self.ptr = 0

    def pos(self):
        return self.ptr

    def get_token(self):
        """ Consume and return the next token.
        """
        token = self.look_ahead()
        self.ptr += 1
        return token

    def look_ahead(self):
        """ Return the next token without consuming it.
        """
        if self.ptr >= len(self.tokens):
            raise SynError('Unexpected end of input', self.ptr)
        return self.tokens[self.ptr]

    def eof(self):
        return self.tokens[min(self.ptr, len(self.tokens) - 1)].tp == TokenType.EOF
