
from enum import Enum

class Operator(Enum):
    # arithmetics
    PLUS = 0
    MINUS = 1
    MUL = 2
    DIV = 3
    # logic
    AND = 4
    OR = 5
    NOT = 6
    # relationship
    EQ = 7
    NE = 8
    LT = 9
    GT = 10
    LE = 11
    GE = 12


class OpClass(Enum):

    ARITH = 0
    LOGIC = 1
    REL = 2


OpSymbols = ['.plus.', '.minus.', '.mul.', '.div.',
            '.and.', '.or.', '.not.',
            '.eq.', '.ne.', '.lt.', '.gt.', '.le.', '.ge.'
]

OpClassLoc = dict(zip(Operator, [
    OpClass.ARITH, OpClass.ARITH, OpClass.ARITH, OpClass.ARITH,
    OpClass.LOGIC, OpClass.LOGIC, OpClass.LOGIC,
    OpClass.REL, OpClass.REL, OpClass.REL, OpClass.REL, OpClass.REL, OpClass.REL
]))

OpAryLoc = dict(zip(Operator, [
    2, 2, 2, 2,
    2, 2, 1,
    2, 2, 2, 2, 2, 2
]))

OpLoc = dict(zip(OpSymbols, Operator))

# .minus. is both binary and unary
unary_ops = {Operator.MINUS, Operator.NOT}


def is_binary(op):
    return OpAryLoc[op] == 2


def yields_logical(op):
    """ Logical and relational operators always produce a logical value.
    """
    return OpClassLoc[op] != OpClass.ARITH
