class WhoisError(Exception):
    pass


class WhoisNetworkError(WhoisError):
    pass


class WhoisEmptyResponseError(WhoisError):
    """The whois server closed the connection without sending anything."""
    pass


class WhoisServerNotFoundError(WhoisError):
    """No whois server is known for the top level label of the domain."""
    pass
