
import logging
from enum import Enum

from . import lex

from .errors import LexError, SynError, DeclError, TypeCheckError
from .tokens import Token, TokenType, TokenStream
from .symbols import SymbolTable
from .preprocess import SourceReader

from .grammar.keywords import Keyword, Separator, KeywordLoc, SepLoc, stmt_enders, expr_enders
from .grammar.basic_types import ValType, TypenameLoc, is_char_literal
from .grammar.operators import Operator, OpLoc, unary_ops, is_binary, yields_logical

logger = logging.getLogger(__name__)


class Verdict(Enum):

    OK = 'ok'
    ERROR = 'error'

    def __str__(self):
        return self.value


class Parser:
    """
    The checker for DOPL.
    Recursive descent with one token of look ahead; types are inferred while
    parsing, so a single pass both validates the grammar and type checks.
    Every rule raises at the first problem, there is no recovery.
    """

    def __init__(self):
        self.cur_token = None
        self.next_token = None
        self.stream = None
        self.lexer = lex.Lexer()
        self.symtable = SymbolTable()

    def clear(self):
        """ Clear tokens, symbol table, lex.
        """
        self.cur_token = None
        self.next_token = None
        self.stream = None
        self.lexer.clear()
        self.symtable.clear()

    def check(self, ifile):
        """ Check a whole program.
            ifile: the text, or an iterable of its lines.
            Returns Verdict.OK or Verdict.ERROR.
        """
        self.clear()
        self.lexer.load(ifile)
        self.lexer.scan()

        try:
            if self.lexer.error:
                raise self.lexer.errors[0]

            self.stream = TokenStream(self.lexer.tokens)
            self.next_token = self.stream.get_token()
            self._parse_program()

        except (LexError, SynError) as e:
            logger.debug('%s', e)
            return Verdict.ERROR

        except RecursionError:
            # nesting deeper than the interpreter stack
            logger.debug('Program nested too deeply at token %d', self.cur_pos())
            return Verdict.ERROR

        return Verdict.OK

    def check_file(self, filename, reader=None):
        """ Check a source file. ReadError is not folded into the verdict.
        """
        reader = reader or SourceReader()
        return self.check(reader.process_file(filename))

    def _parse_program(self):
        """ Parse the whole token stream.
        Syntax:
            program = 'start' decl* stmt* 'finish'
        """

        self.force_match_kwd(Keyword.START)

        while self.match_noget(TokenType.KEYWORD, lambda x: x in TypenameLoc):
            self._parse_decl()

        self._parse_stmt_list()
        self.force_match_kwd(Keyword.FINISH)

        if not self.match_noget(TokenType.EOF):
            raise SynError('Unexpected token after finish: %s' % self.next_token, self.cur_pos())

    def _parse_decl(self):
        """ Parse a declaration group.
        Syntax:
            decl = TYPE id_list ';'
            id_list = id | id_list ',' id

        A group with n names has exactly n - 1 commas.
        """

        self.force_match(TokenType.KEYWORD, lambda x: x in TypenameLoc)
        vtype = TypenameLoc[self.cur_token.val]
        commas = 0
        names = 0

        while True:
            if self.match_sep(Separator.SEMI):
                if names == 0:
                    raise DeclError('No identifier declared', self.cur_pos())
                elif commas != names - 1:
                    raise DeclError('Trailing comma', self.cur_pos())
                break

            elif self.match_sep(Separator.COMMA):
                commas += 1
                if commas > names:
                    raise DeclError('Comma without identifier', self.cur_pos())

            elif self.match(TokenType.NAME):
                name = self.cur_token.val
                if not valid_name(name):
                    raise DeclError('Invalid identifier %s' % name, self.cur_pos())

                names += 1
                if names - commas > 1:
                    raise DeclError('Missing comma before %s' % name, self.cur_pos())
                self.symtable.declare(name, vtype, self.cur_pos())

            else:
                raise DeclError('Unrecognized token in declaration: %s' % self.next_token, self.cur_pos())

    def _parse_stmt_list(self):
        """ Parse statements up to (not including) a terminator keyword.
        """

        while not self.match_noget(TokenType.KEYWORD, lambda x: x in stmt_enders):
            self._parse_stmt()

    def _parse_stmt(self):
        """ Parse a statement.
        Syntax:
            stmt = id '<-' expr ';'
                | 'if' expr 'then' stmt* ('else' stmt*)? 'endif' ';'
                | 'print' expr ';'
                | 'loopif' expr 'do' stmt* 'endloop' ';'
        """

        # assignment
        if self.match(TokenType.NAME):
            symbol = self.lookup(self.cur_token)
            self.force_match(TokenType.ASN)
            vtype = self._parse_expr()
            if vtype != symbol.type:
                raise TypeCheckError('Cannot assign %s to %s %s' % (vtype, symbol.type, symbol.name), self.cur_pos())
            self.force_match_sep(Separator.SEMI)

        # if
        elif self.match_kwd(Keyword.IF):
            self._parse_cond()
            self.force_match_kwd(Keyword.THEN)
            self._parse_stmt_list()
            if self.match_kwd(Keyword.ELSE):
                self._parse_stmt_list()
            self.force_match_kwd(Keyword.ENDIF)
            self.force_match_sep(Separator.SEMI)

        # print
        elif self.match_kwd(Keyword.PRINT):
            self._parse_expr()
            self.force_match_sep(Separator.SEMI)

        # loopif
        elif self.match_kwd(Keyword.LOOPIF):
            self._parse_cond()
            self.force_match_kwd(Keyword.DO)
            self._parse_stmt_list()
            self.force_match_kwd(Keyword.ENDLOOP)
            self.force_match_sep(Separator.SEMI)

        else:
            raise SynError('Unrecognized statement: %s' % self.next_token, self.cur_pos())

    def _parse_cond(self):
        """ Parse the controlling expression of if/loopif; it must be logical.
        """

        vtype = self._parse_expr()
        if vtype != ValType.LOGICAL:
            raise TypeCheckError('Condition is %s, logical required' % vtype, self.cur_pos())

    def _parse_expr(self):
        """ Parse an expression. Returns its type.
        Syntax:
            expr = term | expr binary_op term

        Operators are not ranked, the type is worked out left to right:
        a logical/relational operator makes the expression logical, a
        character operand turns a non-logical expression into character.
        """

        vtype = self._parse_term()

        while not self.match_noget_expr_end():

            if not self.match(TokenType.OP, lambda x: x in OpLoc and is_binary(OpLoc[x])):
                raise SynError('Binary operator required, got %s' % self.next_token, self.cur_pos())

            if yields_logical(OpLoc[self.cur_token.val]):
                vtype = ValType.LOGICAL

            term_type = self._parse_term()
            if vtype != ValType.LOGICAL and term_type == ValType.CHARACTER:
                vtype = ValType.CHARACTER

        return vtype

    def _parse_term(self):
        """ Parse a term. Returns its type.
        Syntax:
            term = int | char | id
                | '.minus.' term
                | '.not.' term
                | '(' expr ')'
        """

        # unary operators; .minus. keeps the type, .not. anywhere makes it logical
        negated = False
        while self.match(TokenType.OP, lambda x: OpLoc.get(x) in unary_ops):
            if OpLoc[self.cur_token.val] == Operator.NOT:
                negated = True

        vtype = self._parse_primary()
        return ValType.LOGICAL if negated else vtype

    def _parse_primary(self):
        """ Parse a term without its unary operators. Returns its type.
        """

        if self.match(TokenType.INT):
            return ValType.INTEGER

        elif self.match(TokenType.CHAR):
            if not is_char_literal(self.cur_token.val):
                raise SynError('Bad character constant %s' % self.cur_token.val, self.cur_pos())
            return ValType.CHARACTER

        elif self.match(TokenType.NAME):
            return self.lookup(self.cur_token).type

        elif self.match_sep(Separator.LBRA):
            vtype = self._parse_expr()
            self.force_match_sep(Separator.RBRA)
            return vtype

        else:
            raise SynError('Not a term: %s' % self.next_token, self.cur_pos())

    def lookup(self, token:Token):
        symbol = self.symtable.lookup(token.val)
        if symbol is None:
            raise SynError('Undeclared identifier %s' % token.val, self.cur_pos())
        return symbol

    def cur_pos(self):
        return self.stream.pos() if self.stream else 0

    def match(self, token_type, func=None):
        if self.match_noget(token_type, func):
            self.cur_token = self.next_token
            self.next_token = self.stream.get_token()
            return True
        return False

    def match_op(self, opname):
        return self.match(TokenType.OP, lambda x: OpLoc.get(x) == opname)

    def match_sep(self, sepname):
        return self.match(TokenType.SEP, lambda x: SepLoc.get(x) == sepname)

    def match_kwd(self, kwdname):
        return self.match(TokenType.KEYWORD, lambda x: KeywordLoc.get(x) == kwdname)

    def force_match(self, token_type, func=None):
        if not self.match(token_type, func):
            raise SynError('Token not match: %s required, got %s' % (token_type, self.next_token), self.cur_pos())

    def force_match_sep(self, sepname):
        if not self.match_sep(sepname):
            raise SynError('Separator not match: %s required, got %s' % (sepname, self.next_token.val), self.cur_pos())

    def force_match_kwd(self, kwdname):
        if not self.match_kwd(kwdname):
            raise SynError('Keyword not match: %s required, got %s' % (kwdname, self.next_token.val), self.cur_pos())

    def match_noget(self, token_type, func=None):
        """ Match without get. So next time still same token.
        """
        return self.next_token.tp == token_type and (func is None or func(self.next_token.val))

    def match_noget_expr_end(self):
        return self.next_token.tp in (TokenType.SEP, TokenType.KEYWORD) and self.next_token.val in expr_enders


def valid_name(name:str):
    """ Identifiers begin with a letter, then letters, digits or '_'.
    """
    return name[:1].isalpha() and all(c.isalpha() or c.isdecimal() or c == '_' for c in name)


def check(ifile):
    """ Check a program with a fresh parser.
    """
    return Parser().check(ifile)
