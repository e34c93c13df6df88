""" Generation of a complete dispatch artifact.

The artifact consists of these blocks, in order:

- include of the runtime header
- enumeration of the grammar symbols
- names of the grammar symbols
- the lexer function, switching on the lexer state
- the parser function, switching on the parser state
- the exported parser descriptor

"""

import logging
from . import ir
from .actions import ActionEncoder, call
from .naming import symbol_id
from .printer import CPrinter
from .states import StateEmitter
from .validation import validate

DEFAULT_RUNTIME_HEADER = 'runtime/parser.h'
LEX_ERROR_STATE = 'LEX_STATE_ERROR'


class CodeGenerator:
    """ Generator that turns a parse table and a lex table into code """
    def __init__(
            self, name, parse_table, lex_table, strict=True,
            runtime_header=DEFAULT_RUNTIME_HEADER):
        self.logger = logging.getLogger('dispatchgen')
        self.name = name
        self.parse_table = parse_table
        self.lex_table = lex_table
        self.strict = strict
        self.runtime_header = runtime_header

    def code(self):
        """ Validate the tables and render the complete artifact """
        unit = self.build()
        self.logger.debug('Rendering %s', unit)
        return CPrinter().render(unit)

    def build(self):
        """ Validate the tables and build the dispatch tree """
        self.logger.debug(
            'Generating dispatch code for %s from %s and %s',
            self.name, self.parse_table, self.lex_table)
        validate(
            self.name, self.parse_table, self.lex_table, strict=self.strict)
        emitter = StateEmitter(ActionEncoder(strict=self.strict))
        return ir.Unit([
            ir.Include(self.runtime_header),
            self.symbol_enum(),
            self.symbol_names(),
            self.lex_function(emitter),
            self.parse_function(emitter),
            self.parse_config(),
        ])

    def symbol_enum(self):
        return ir.Enumeration(
            symbol_id(symbol) for symbol in self.parse_table.symbols)

    def symbol_names(self):
        return ir.NameTable(
            symbol.name for symbol in self.parse_table.symbols)

    def switch_on_lex_state(self, emitter):
        cases = []
        for index, lex_state in enumerate(self.lex_table.states):
            cases.append(ir.Case(
                ir.Number(index), emitter.lex_state(lex_state, index)))
        cases.append(ir.Case(
            ir.Name(LEX_ERROR_STATE),
            emitter.lex_state(self.lex_table.error_state, 'error')))
        self.logger.debug('Emitted %s lex states', len(cases))
        return ir.Switch(
            ir.Call('LEX_STATE'), cases, ir.Default(call('LEX_PANIC')))

    def switch_on_parse_state(self, emitter):
        cases = []
        for index, parse_state in enumerate(self.parse_table.states):
            cases.append(ir.Case(
                ir.Number(index), emitter.parse_state(parse_state, index)))
        self.logger.debug('Emitted %s parse states', len(cases))
        return ir.Switch(
            ir.Call('PARSE_STATE'), cases, ir.Default(call('PARSE_PANIC')))

    def lex_function(self, emitter):
        return ir.FunctionDefinition('LEX_FN', ir.Compound([
            call('START_LEXER'),
            self.switch_on_lex_state(emitter),
            call('FINISH_LEXER'),
        ]))

    def parse_function(self, emitter):
        return ir.FunctionDefinition('PARSE_FN', ir.Compound([
            call('START_PARSER'),
            self.switch_on_parse_state(emitter),
            call('FINISH_PARSER'),
        ]))

    def parse_config(self):
        return ir.ExportParser('parse_config_{}'.format(self.name))


def c_code(name, parse_table, lex_table, **options):
    """ Generate the dispatch code for a language as C text """
    return CodeGenerator(name, parse_table, lex_table, **options).code()
