"""Errors raised while reading a sector analysis document."""


class SectorAnalysisError(Exception):
    """Base class for every failure of the sector analysis parser."""


class DocumentOpenError(SectorAnalysisError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        msg = f'Failed to open document {path}'
        if reason:
            msg += f': {reason}'
        super().__init__(msg)


class PageExtractionError(SectorAnalysisError):
    def __init__(self, page, reason=None):
        self.page = page
        self.reason = reason
        msg = f'Failed to extract tokens from page {page}'
        if reason:
            msg += f': {reason}'
        super().__init__(msg)


class TokenParseError(SectorAnalysisError):
    """A token at an expected offset did not have the expected shape.

    ``step`` names the decoding step that failed (e.g. ``'sector 2 time'``),
    ``value`` is the raw token and ``index`` its position in the page's
    token list. ``page`` is filled in by the page scan once it is known.
    """

    def __init__(self, value, index, step, page=None):
        self.value = value
        self.index = index
        self.step = step
        self.page = page
        super().__init__(self._message())

    def _message(self):
        msg = f'Failed to parse {self.step}. value: {self.value!r}, index: {self.index}'
        if self.page is not None:
            msg += f', page: {self.page}'
        return msg

    def with_page(self, page):
        self.page = page
        self.args = (self._message(),)
        return self
