class CurrencyException(Exception):
    pass


class ProviderError(CurrencyException):
    pass


class ProviderRejectedError(CurrencyException):
    def __init__(self, info: str, *, code: str = "", error_type: str = ""):
        super().__init__(info)
        self.info = info
        self.code = code
        self.error_type = error_type


class PaginationError(CurrencyException, ValueError):
    pass
