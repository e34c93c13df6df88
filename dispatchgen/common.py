"""
   Error handling routines
   Shared logging format
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class GenerationError(Exception):
    """ Raised when dispatch code cannot be generated for the given tables.

    The optional table, state and key attributes locate the offending
    entry in the input tables.
    """
    def __init__(self, msg, table=None, state=None, key=None):
        super().__init__(msg)
        self.msg = msg
        self.table = table
        self.state = state
        self.key = key

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def __str__(self):
        location = self.location
        if location:
            return '{}: {}'.format(location, self.msg)
        return self.msg

    @property
    def location(self):
        """ Human readable description of where the error was found """
        parts = []
        if self.table is not None:
            if self.state is None:
                parts.append('{} table'.format(self.table))
            else:
                parts.append('{} state {}'.format(self.table, self.state))
        if self.key is not None:
            parts.append('key {!r}'.format(self.key))
        return ', '.join(parts)

    def print(self, file=None):
        """ Print the error with its location """
        print(str(self), file=file)


class ValidationError(GenerationError):
    """ The input tables are structurally inconsistent """
    pass


class AmbiguousActionError(ValidationError):
    """ More than one action remains for a single key """
    pass


class TableFormatError(GenerationError):
    """ A serialized table document is malformed """
    pass
