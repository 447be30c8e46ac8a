"""Errors raised by the Helix client."""


class TransportError(RuntimeError):
    """The request failed on the network or its body was not JSON."""
    
    def __init__(self, message: str, url: str = None, verb: str = None):
        super().__init__(message)
        self.url = url
        self.verb = verb
