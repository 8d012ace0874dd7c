# errors.py


class PageRankError(Exception):
    """Base class for corpus loading and ranking failures."""


class CorpusLoadError(PageRankError, ValueError):
    """The corpus could not be read or a record in it is malformed."""


class EmptyCorpusError(PageRankError):
    """The corpus holds no documents, so there is nothing to rank."""
