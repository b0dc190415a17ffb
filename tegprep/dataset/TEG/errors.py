class TEGError(Exception):
    """ Base class of every fatal error raised while preparing a temporal edge graph. """


class FormatError(TEGError):
    """ A line (or raw record) does not have the expected number of fields. """


class ParseError(TEGError):
    """ A field is not a valid non-negative integer. """


class DuplicateEdgeError(TEGError):
    """ The same ordered (source, target) pair appears more than once. """


class IdSpaceError(TEGError):
    """ Vertex or timestamp ids are not a dense, zero-based integer range. """
