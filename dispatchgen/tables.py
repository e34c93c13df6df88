""" Parse and lex table structures.

These are the inputs of the generator. They are built upstream by a
parser generator and a scanner generator, and are treated as
immutable values here.
"""

from .charset import CharacterSet


class Symbol:
    """ A grammar symbol. Auxiliary symbols are synthesized by the
    grammar builder instead of declared by the user. """
    __slots__ = ('name', 'is_auxiliary')

    def __init__(self, name, is_auxiliary=False):
        self.name = name
        self.is_auxiliary = bool(is_auxiliary)

    def __repr__(self):
        if self.is_auxiliary:
            return 'Symbol({!r}, aux)'.format(self.name)
        return 'Symbol({!r})'.format(self.name)

    def __eq__(self, other):
        if isinstance(other, Symbol):
            return self.sort_key() == other.sort_key()
        return False

    def __hash__(self):
        return hash(self.sort_key())

    def sort_key(self):
        return (self.name, self.is_auxiliary)


class Action:
    """ Base class of parse and lex actions.

    Actions compare and hash by their canonical sort key, so that
    duplicates collapse in an action set and sets can be ordered.
    """
    rank = 0

    def sort_key(self):
        return (self.rank,)

    def __eq__(self, other):
        if type(other) is type(self):
            return self.sort_key() == other.sort_key()
        return False

    def __hash__(self):
        return hash(self.sort_key())

    def __lt__(self, other):
        return self.sort_key() < other.sort_key()


# Parse actions:
class ParseAction(Action):
    pass


class Accept(ParseAction):
    """ Accept the complete input """
    rank = 0

    def __repr__(self):
        return 'Accept()'


class Shift(ParseAction):
    """ Shift over the next token and go to the given state """
    rank = 1

    def __init__(self, to_state):
        self.to_state = to_state

    def sort_key(self):
        return (self.rank, self.to_state)

    def __repr__(self):
        return 'Shift({})'.format(self.to_state)


class Reduce(ParseAction):
    """ Pop arity nodes and produce a node for symbol.

    Every collapse flag tells whether the matching child is inlined
    into its parent.
    """
    rank = 2

    def __init__(self, symbol, arity, collapse_flags):
        self.symbol = symbol
        self.arity = arity
        self.collapse_flags = tuple(bool(f) for f in collapse_flags)

    def sort_key(self):
        return (
            self.rank, self.symbol.sort_key(), self.arity,
            self.collapse_flags)

    def __repr__(self):
        return 'Reduce({}, {}, {})'.format(
            self.symbol, self.arity, list(self.collapse_flags))


# Lex actions:
class LexAction(Action):
    pass


class Advance(LexAction):
    """ Consume the lookahead character and go to the given state """
    rank = 0

    def __init__(self, to_state):
        self.to_state = to_state

    def sort_key(self):
        return (self.rank, self.to_state)

    def __repr__(self):
        return 'Advance({})'.format(self.to_state)


class AcceptToken(LexAction):
    """ Finish the current token as the given symbol """
    rank = 1

    def __init__(self, symbol):
        self.symbol = symbol

    def sort_key(self):
        return (self.rank, self.symbol.sort_key())

    def __repr__(self):
        return 'AcceptToken({})'.format(self.symbol)


class LexError(LexAction):
    """ Explicit no match """
    rank = 2

    def __repr__(self):
        return 'LexError()'


def action_set(actions):
    """ Normalize a single action or an iterable of actions """
    if isinstance(actions, Action):
        actions = [actions]
    return frozenset(actions)


def action_pairs(actions):
    """ Normalize an action mapping into a tuple of (key, actions) pairs.

    Both dicts and sequences of pairs are accepted. The stored order
    is kept and duplicate keys are not merged.
    """
    if hasattr(actions, 'items'):
        actions = actions.items()
    return tuple((key, action_set(value)) for key, value in actions)


class ParseState:
    """ A parser state: lookahead symbol to actions, plus the lexer
    state that is active while this state is on top of the stack. """
    def __init__(self, actions, lex_state_id):
        self.actions = action_pairs(actions)
        self.lex_state_id = lex_state_id

    def __repr__(self):
        return 'ParseState(lex_state={}, {} keys)'.format(
            self.lex_state_id, len(self.actions))

    def expected_inputs(self):
        """ All symbols that have an action in this state, in order """
        symbols = []
        for symbol, _ in self.actions:
            if symbol not in symbols:
                symbols.append(symbol)
        return symbols


class ParseTable:
    def __init__(self, symbols, states):
        self.symbols = tuple(symbols)
        self.states = tuple(states)

    def __repr__(self):
        return 'ParseTable({} symbols, {} states)'.format(
            len(self.symbols), len(self.states))


class LexState:
    """ A lexer state: character classes to actions, tested in order,
    and the actions taken when no class matches. """
    def __init__(self, actions, default_actions=()):
        self.actions = action_pairs(actions)
        for character_set, _ in self.actions:
            if not isinstance(character_set, CharacterSet):
                raise TypeError(
                    'Lex state keys must be CharacterSet, got {}'.format(
                        type(character_set)))
        self.default_actions = action_set(default_actions)

    def __repr__(self):
        return 'LexState({} keys)'.format(len(self.actions))


class LexTable:
    def __init__(self, states, error_state):
        self.states = tuple(states)
        self.error_state = error_state

    def __repr__(self):
        return 'LexTable({} states)'.format(len(self.states))
