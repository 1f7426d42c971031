"""Exception types for searchtree.

Every error is raised at the point of violation and propagated to the
caller. A missing value is not an error: ``Tree.find`` returns ``None`` and
deleting an absent value does nothing.
"""


class TreeError(Exception):
    """Base class for all searchtree errors."""
    pass


class TypeMismatchError(TreeError, TypeError):
    """Raised when a non-Node is used as a child or comparison operand."""
    pass


class InvalidInputError(TreeError, TypeError):
    """Raised when a tree is built from something other than a finite
    sequence of orderable values, or with an invalid configuration."""
    pass


class PreconditionViolatedError(TreeError):
    """Raised when an operation that needs a non-empty tree runs on an empty one."""
    pass
