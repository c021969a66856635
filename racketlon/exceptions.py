class RacketlonError(Exception):
    pass


class OcrExtractionError(RacketlonError):
    pass


class MatchFileError(RacketlonError, ValueError):
    pass


class UnknownSportError(RacketlonError, ValueError):
    pass
