""" Dispatch tree to source code printer.

Rendering goes through :class:`Lines`, a list of (indent, text) records.
Nested blocks are composed by shifting the records of the inner block,
and the whole artifact is turned into text only once at the end.
"""

from . import ir


class Lines:
    """ Immutable sequence of (indent level, text) records.

    >>> block = Lines.of('case 1:') + Lines.of('SHIFT(2);').indented()
    >>> print(block.render())
    case 1:
        SHIFT(2);
    """
    __slots__ = ('records',)

    def __init__(self, records=()):
        self.records = tuple(records)

    @classmethod
    def of(cls, *texts):
        return cls((0, text) for text in texts)

    def __add__(self, other):
        return Lines(self.records + other.records)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __eq__(self, other):
        if isinstance(other, Lines):
            return self.records == other.records
        return False

    def __repr__(self):
        return 'Lines({} records)'.format(len(self.records))

    def indented(self, amount=1):
        """ Get these lines shifted right by amount levels """
        return Lines((level + amount, text) for level, text in self.records)

    def render(self, tab='    '):
        """ Produce text, without a trailing newline """
        return '\n'.join(
            tab * level + text if text else ''
            for level, text in self.records)


def concat(blocks):
    """ Glue several line blocks one after the other """
    records = []
    for block in blocks:
        records.extend(block.records)
    return Lines(records)


def separated(blocks):
    """ Glue line blocks with one empty line in between """
    records = []
    for block in blocks:
        if records:
            records.append((0, ''))
        records.extend(block.records)
    return Lines(records)


_char_escapes = {
    0: '\\0',
    ord('\t'): '\\t',
    ord('\n'): '\\n',
    ord('\r'): '\\r',
    ord("'"): "\\'",
    ord('\\'): '\\\\',
}


def char_literal(code):
    """ Render a character code as a C character constant.

    Codes without a plain ASCII spelling are written as numbers.

    >>> char_literal(ord('x'))
    "'x'"
    >>> char_literal(0x263a)
    '9786'
    """
    if code in _char_escapes:
        return "'{}'".format(_char_escapes[code])
    elif 32 <= code < 127:
        return "'{}'".format(chr(code))
    else:
        return str(code)


def string_literal(text):
    """ Render text as a C string literal """
    parts = []
    for c in text:
        if c == '"':
            parts.append('\\"')
        elif c == '\\':
            parts.append('\\\\')
        elif c == '\n':
            parts.append('\\n')
        elif c == '\t':
            parts.append('\\t')
        elif ord(c) < 32 or ord(c) == 127:
            parts.append('\\{:03o}'.format(ord(c)))
        else:
            parts.append(c)
    return '"{}"'.format(''.join(parts))


class CPrinter:
    """ Render a dispatch tree as C text on top of the runtime macros """

    def render(self, unit):
        """ Render complete unit, ending with a newline """
        return self.gen_unit(unit).render() + '\n'

    def gen_unit(self, unit):
        return separated(
            self.gen_declaration(declaration)
            for declaration in unit.declarations)

    def gen_declaration(self, declaration):
        """ Spit out a top level declaration """
        if isinstance(declaration, ir.Include):
            return Lines.of('#include {}'.format(
                string_literal(declaration.path)))
        elif isinstance(declaration, ir.Enumeration):
            return (
                Lines.of('enum {') +
                Lines.of(*('{},'.format(n) for n in declaration.names))
                .indented() +
                Lines.of('};'))
        elif isinstance(declaration, ir.NameTable):
            return (
                Lines.of('SYMBOL_NAMES {') +
                Lines.of(*(
                    '{},'.format(string_literal(n))
                    for n in declaration.names)).indented() +
                Lines.of('};'))
        elif isinstance(declaration, ir.FunctionDefinition):
            return (
                Lines.of('{}() {{'.format(declaration.name)) +
                self.gen_statement(declaration.body).indented() +
                Lines.of('}'))
        elif isinstance(declaration, ir.ExportParser):
            return Lines.of('EXPORT_PARSER({});'.format(declaration.name))
        else:  # pragma: no cover
            raise NotImplementedError(str(declaration))

    def gen_statement(self, statement):
        """ Render a single statement as lines """
        if isinstance(statement, ir.Instruction):
            return Lines.of('{};'.format(self.gen_expr(statement.call)))
        elif isinstance(statement, ir.Compound):
            return concat(map(self.gen_statement, statement.statements))
        elif isinstance(statement, ir.If):
            return (
                Lines.of('if ({})'.format(
                    self.gen_expr(statement.condition))) +
                self.gen_statement(statement.body).indented())
        elif isinstance(statement, ir.Switch):
            return (
                Lines.of('switch ({}) {{'.format(
                    self.gen_expr(statement.subject))) +
                concat(map(self.gen_statement, statement.cases)).indented() +
                self.gen_statement(statement.default).indented() +
                Lines.of('}'))
        elif isinstance(statement, ir.Case):
            return (
                Lines.of('case {}:'.format(self.gen_expr(statement.label))) +
                self.gen_statement(statement.body).indented())
        elif isinstance(statement, ir.Default):
            return (
                Lines.of('default:') +
                self.gen_statement(statement.body).indented())
        else:  # pragma: no cover
            raise NotImplementedError(str(statement))

    def gen_expr(self, expr):
        """ Format an expression as text """
        if isinstance(expr, ir.Name):
            return expr.name
        elif isinstance(expr, ir.Number):
            return str(expr.value)
        elif isinstance(expr, ir.CharLiteral):
            return char_literal(expr.code)
        elif isinstance(expr, ir.Constant):
            return '1' if expr.value else '0'
        elif isinstance(expr, ir.Initializer):
            return '{' + ', '.join(map(self.gen_expr, expr.values)) + '}'
        elif isinstance(expr, ir.Call):
            args = ', '.join(map(self.gen_expr, expr.args))
            return '{}({})'.format(expr.callee, args)
        elif isinstance(expr, ir.Equality):
            return '{} == {}'.format(
                self.gen_expr(expr.a), self.gen_expr(expr.b))
        elif isinstance(expr, ir.RangeTest):
            value = self.gen_expr(expr.value)
            return '{} <= {} && {} <= {}'.format(
                self.gen_expr(expr.low), value,
                value, self.gen_expr(expr.high))
        elif isinstance(expr, ir.LogicalOr):
            return ' || '.join(
                '({})'.format(self.gen_expr(p)) for p in expr.parts)
        elif isinstance(expr, ir.LogicalNot):
            return '!({})'.format(self.gen_expr(expr.a))
        else:  # pragma: no cover
            raise NotImplementedError(str(type(expr)))


def print_tree(node, file=None):
    """ Display a dispatch tree, one node per line.

    >>> print_tree(ir.Instruction(ir.Call('SHIFT', [ir.Number(2)])))
    Instruction SHIFT
        Call SHIFT
            Number 2
    """
    TreePrinter(file=file).print(node)


class TreePrinter:
    """ Print the structure of a dispatch tree """
    def __init__(self, file=None):
        self.indent = 0
        self.file = file

    def print(self, node):
        self._print(node)
        self.indent += 1
        for child in ir.children(node):
            self.print(child)
        self.indent -= 1

    def _print(self, node):
        print('    ' * self.indent + str(node), file=self.file)
