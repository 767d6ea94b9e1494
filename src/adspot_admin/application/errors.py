class AdSpotNotFoundError(Exception):
    def __init__(self, adspot_id: str) -> None:
        super().__init__(f"AdSpot {adspot_id} not found")
        self.adspot_id = adspot_id


class DuplicateAdSpotError(Exception):
    pass


class SeedDataError(Exception):
    """Raised when a seed file cannot be read or does not match the seed schema."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
