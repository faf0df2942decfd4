"""
Error types raised by the graph backends.
"""


class InvalidArgumentError(ValueError):
    """
    Raised for None vertices or costs, and for edges whose endpoints are not
    members of the graph.

    Absence is never an error: lookups that find nothing return False, an
    empty collection, or None instead of raising.
    """
