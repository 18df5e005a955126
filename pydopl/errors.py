""" Errors raised in pydopl
"""

class ReadError(RuntimeError):
    """ Errors in locating/reading a source file
    """

    def __init__(self, err):
        super().__init__('Reading error: %s' % err)


class LexError(RuntimeError):
    """ Text cannot be split into tokens
    """

    def __init__(self, err, line):
        self.err = err
        self.line = line

        super().__init__('LexicalError at line %d: ' % self.line + self.err)


class SynError(RuntimeError):
    """ General syntax error
    """

    def __init__(self, err, pos):
        self.err = err
        self.pos = pos

        super().__init__('SyntaxError at token %d: ' % self.pos + self.err)


class DeclError(SynError):
    """ Malformed declaration group or name collision.
    """

    def __init__(self, err, pos=-1):
        super().__init__(err, pos)


class TypeCheckError(SynError):
    """ Type of an expression does not fit where it is used.
    """

    def __init__(self, err, pos):
        super().__init__(err, pos)
