"""Upstream client errors."""


class UpstreamUnavailable(Exception):
    """Upstream fetch failed (network, auth, quota or malformed response)."""

    def __init__(self, message: str = "Upstream data source unavailable"):
        self.message = message
        super().__init__(self.message)


class CredentialsError(Exception):
    """Google credentials could not be loaded or refreshed."""

    def __init__(self, message: str = "Invalid Google credentials"):
        self.message = message
        super().__init__(self.message)
