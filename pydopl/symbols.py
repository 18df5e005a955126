""" Symbol table: declared identifiers and their types.
"""

from .errors import DeclError


class Symbol:
    """ Represent a declared identifier.
    """

    def __init__(self, name, vtype):

        self.name = name
        self.type = vtype

    def __repr__(self):
        return '[Symbol %s: %s]' % (self.name, self.type)


class SymbolTable:
    """ Maps identifier name to Symbol. Filled by the declarations,
        only read by the statements.
    """

    def __init__(self):
        self.symbols = {}

    def declare(self, name, vtype, pos=-1):
        if name in self.symbols:
            raise DeclError('Identifier %s already declared' % name, pos)
        self.symbols[name] = Symbol(name, vtype)
        return self.symbols[name]

    def lookup(self, name):
        """ Returns the symbol, or None if the name is unknown.
        """
        return self.symbols.get(name)

    def type_of(self, name):
        return self.symbols[name].type

    def __contains__(self, name):
        return name in self.symbols

    def __len__(self):
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols.values())

    def clear(self):
        self.symbols.clear()
