"""Free functions over a live driver handle."""

from typing import Protocol


class TitledDriver(Protocol):
    def title(self) -> str: ...


def get_page_title(driver: TitledDriver) -> str:
    """Return the current page title as reported by the driver."""
    return driver.title()
