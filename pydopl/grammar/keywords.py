""" Keywords definition.
"""

from enum import Enum

prog_kwds = ['start', 'finish']
ctrl_kwds = ['if', 'then', 'else', 'endif', 'loopif', 'do', 'endloop', 'print']
type_kwds = ['integer', 'character', 'logical']  # they are typenames
sep_kwds = [',', ';', '(', ')']                     # they are separators

class Keyword(Enum):

    START = 0
    FINISH = 1
    IF = 2
    THEN = 3
    ELSE = 4
    ENDIF = 5
    LOOPIF = 6
    DO = 7
    ENDLOOP = 8
    PRINT = 9
    INTEGER = 10
    CHARACTER = 11
    LOGICAL = 12


class Separator(Enum):
    COMMA = 0
    SEMI = 1
    LBRA = 2
    RBRA = 3


KeywordLoc = dict(zip(prog_kwds + ctrl_kwds + type_kwds, Keyword))
SepLoc = dict(zip(sep_kwds, Separator))

# keywords that end a statement list
stmt_enders = {'finish', 'else', 'endif', 'endloop'}

# tokens that end an expression without being part of it
expr_enders = {';', 'then', 'do', 'else', ')'}
