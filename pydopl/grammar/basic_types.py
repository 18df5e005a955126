
from enum import Enum

typenames = ['integer', 'character', 'logical']

class ValType(Enum):

    INTEGER = 0
    CHARACTER = 1
    LOGICAL = 2

    def __repr__(self):
        return self.name

    def __str__(self):
        return self.name.lower()


TypenameLoc = dict(zip(typenames, ValType))


def is_int_literal(string:str):
    """ An integer constant is made of decimal digits only.
    """
    return string != '' and all('0' <= c <= '9' for c in string)


def is_char_literal(string:str):
    """ A character constant is exactly one character between double quotes.
    """
    return len(string) == 3 and string[0] == string[-1] == '"'
