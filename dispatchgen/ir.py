""" Statement tree for generated dispatch code.

The emitters build these nodes, and a printer turns them into text.
Nothing in here knows about the concrete syntax of the output.
"""

# pylint: disable=R0903


class Node:
    """ Base class of all nodes in the dispatch tree """
    __slots__ = ()


# Expressions:
class Expression(Node):
    """ Base expression """
    __slots__ = ()


class Name(Expression):
    """ Reference to an identifier defined by the runtime or the unit """
    __slots__ = ('name',)

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return 'Name {}'.format(self.name)


class Number(Expression):
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return 'Number {}'.format(self.value)


class CharLiteral(Expression):
    """ A character constant, given by its code point """
    __slots__ = ('code',)

    def __init__(self, code):
        self.code = code

    def __repr__(self):
        return 'Char {}'.format(self.code)


class Constant(Expression):
    """ Boolean constant """
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = bool(value)

    def __repr__(self):
        return 'Constant {}'.format(self.value)


TRUE = Constant(True)
FALSE = Constant(False)


class Initializer(Expression):
    """ Braced list of values """
    __slots__ = ('values',)

    def __init__(self, values):
        self.values = list(values)

    def __repr__(self):
        return 'Initializer with {} values'.format(len(self.values))


class Call(Expression):
    """ Invocation of a runtime primitive """
    __slots__ = ('callee', 'args')

    def __init__(self, callee, args=()):
        self.callee = callee
        self.args = list(args)

    def __repr__(self):
        return 'Call {}'.format(self.callee)


class Equality(Expression):
    __slots__ = ('a', 'b')

    def __init__(self, a, b):
        self.a = a
        self.b = b

    def __repr__(self):
        return 'Equality'


class RangeTest(Expression):
    """ Inclusive test low <= value <= high """
    __slots__ = ('low', 'value', 'high')

    def __init__(self, low, value, high):
        self.low = low
        self.value = value
        self.high = high

    def __repr__(self):
        return 'RangeTest'


class LogicalOr(Expression):
    __slots__ = ('parts',)

    def __init__(self, parts):
        self.parts = list(parts)
        assert len(self.parts) > 1

    def __repr__(self):
        return 'LogicalOr with {} parts'.format(len(self.parts))


class LogicalNot(Expression):
    __slots__ = ('a',)

    def __init__(self, a):
        self.a = a

    def __repr__(self):
        return 'LogicalNot'


# Statements:
class Statement(Node):
    """ Base statement """
    __slots__ = ()


class Instruction(Statement):
    """ A call of a runtime primitive used as a statement """
    __slots__ = ('call',)

    def __init__(self, call):
        assert isinstance(call, Call)
        self.call = call

    def __repr__(self):
        return 'Instruction {}'.format(self.call.callee)


class Compound(Statement):
    """ Statement consisting of a sequence of other statements """
    __slots__ = ('statements',)

    def __init__(self, statements):
        self.statements = list(statements)
        assert all(isinstance(s, Statement) for s in self.statements)

    def __repr__(self):
        return 'Compound'


class If(Statement):
    """ Guarded branch. When the condition fails, control falls
    through to the next statement. """
    __slots__ = ('condition', 'body')

    def __init__(self, condition, body):
        self.condition = condition
        self.body = body

    def __repr__(self):
        return 'If'


class Case(Statement):
    """ Labeled branch of a switch """
    __slots__ = ('label', 'body')

    def __init__(self, label, body):
        self.label = label
        self.body = body

    def __repr__(self):
        return 'Case'


class Default(Statement):
    """ Fallback branch of a switch """
    __slots__ = ('body',)

    def __init__(self, body):
        self.body = body

    def __repr__(self):
        return 'Default'


class Switch(Statement):
    """ Dispatch on a value. A switch always has a default branch. """
    __slots__ = ('subject', 'cases', 'default')

    def __init__(self, subject, cases, default):
        self.subject = subject
        self.cases = list(cases)
        assert all(isinstance(c, Case) for c in self.cases)
        assert isinstance(default, Default)
        self.default = default

    def __repr__(self):
        return 'Switch with {} cases'.format(len(self.cases))


# Top level declarations:
class Declaration(Node):
    __slots__ = ()


class Include(Declaration):
    __slots__ = ('path',)

    def __init__(self, path):
        self.path = path

    def __repr__(self):
        return 'Include {}'.format(self.path)


class Enumeration(Declaration):
    """ Enumeration of identifiers, numbered by position """
    __slots__ = ('names',)

    def __init__(self, names):
        self.names = list(names)

    def __repr__(self):
        return 'Enumeration with {} names'.format(len(self.names))


class NameTable(Declaration):
    """ Table of strings, one per symbol """
    __slots__ = ('names',)

    def __init__(self, names):
        self.names = list(names)

    def __repr__(self):
        return 'NameTable with {} names'.format(len(self.names))


class FunctionDefinition(Declaration):
    __slots__ = ('name', 'body')

    def __init__(self, name, body):
        self.name = name
        self.body = body

    def __repr__(self):
        return 'FunctionDefinition {}'.format(self.name)


class ExportParser(Declaration):
    __slots__ = ('name',)

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return 'ExportParser {}'.format(self.name)


class Unit(Node):
    """ A complete generated artifact """
    __slots__ = ('declarations',)

    def __init__(self, declarations):
        self.declarations = list(declarations)
        assert all(isinstance(d, Declaration) for d in self.declarations)

    def __repr__(self):
        return 'Unit with {} declarations'.format(len(self.declarations))


def children(node):
    """ Get the direct child nodes of a node, in order """
    if isinstance(node, Unit):
        return list(node.declarations)
    elif isinstance(node, FunctionDefinition):
        return [node.body]
    elif isinstance(node, Compound):
        return list(node.statements)
    elif isinstance(node, Switch):
        return [node.subject] + node.cases + [node.default]
    elif isinstance(node, Case):
        return [node.label, node.body]
    elif isinstance(node, Default):
        return [node.body]
    elif isinstance(node, If):
        return [node.condition, node.body]
    elif isinstance(node, Instruction):
        return [node.call]
    elif isinstance(node, Call):
        return list(node.args)
    elif isinstance(node, Initializer):
        return list(node.values)
    elif isinstance(node, Equality):
        return [node.a, node.b]
    elif isinstance(node, RangeTest):
        return [node.low, node.value, node.high]
    elif isinstance(node, LogicalOr):
        return list(node.parts)
    elif isinstance(node, LogicalNot):
        return [node.a]
    else:
        return []
