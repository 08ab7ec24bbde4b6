class GQLBuilderError(Exception):
    """Base class of the errors raised while building a document"""


class DuplicateOperationName(GQLBuilderError, ValueError):
    """An operation with the same name already exists in the document"""


class InvalidDocument(GQLBuilderError):
    """Operations of a document with several operations must all be named"""


class InvalidFragmentTarget(GQLBuilderError, ValueError):
    """The fragment type condition is unknown or cannot be selected on"""


class InvalidInlineFragmentTarget(GQLBuilderError, ValueError):
    """No type could be found for an inline fragment"""


class DuplicateFragmentName(GQLBuilderError, ValueError):
    """A fragment with the same name already exists in the document"""
