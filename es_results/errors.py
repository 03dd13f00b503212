"""
Exceptions raised while mapping Elasticsearch responses.
"""


class ResultError(Exception):
    """Base class for result mapping failures."""


class PathTraversalError(ResultError, TypeError):
    """The response does not have the shape the lookup path expects."""

    def __init__(self, path, segment, message=None):
        self.path = tuple(path)
        self.segment = segment
        if message is None:
            message = f"Cannot traverse '{segment}' in path {'/'.join(self.path)}"
        super().__init__(message)


class FacetConstructionError(ResultError):
    """A facet type could not be resolved or built."""
