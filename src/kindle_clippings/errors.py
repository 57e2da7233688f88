"""Errors raised while decoding a single clippings record."""


class ClippingParseError(Exception):
    """Base class for per-record failures; the pass goes on with the next record"""

    message = "other error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class EndedPrematurelyError(ClippingParseError):
    message = "file ended prematurely"


class InfoLineMatchError(ClippingParseError):
    def __init__(self, doc_title: str):
        self.doc_title = doc_title
        super().__init__(f'matching info line (for document "{doc_title}")')


class KindCaptureError(ClippingParseError):
    message = "capturing entry kind"

    def __init__(self, kind: str = None):
        self.kind = kind
        super().__init__()


class LocationCaptureError(ClippingParseError):
    message = "capturing entry location"

    def __init__(self, token: str = None):
        self.token = token
        super().__init__()


class DateCaptureError(ClippingParseError):
    message = "capturing entry date"

    def __init__(self, date: str = None):
        self.date = date
        super().__init__()


class OtherParseError(ClippingParseError):
    message = "other error"
