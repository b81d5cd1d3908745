class OracleError(Exception):
    """Base error carrying the HTTP status the API layer answers with."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(OracleError):
    status_code = 400


class UpstreamFetchError(OracleError):
    status_code = 404

    def __init__(self, symbol: str):
        super().__init__(f"Failed to fetch price for {symbol}")
        self.symbol = symbol
