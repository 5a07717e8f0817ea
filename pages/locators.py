"""Element locators: a selector strategy paired with a selector string."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SelectorStrategy(str, Enum):
    """How a selector string is resolved against the page."""

    XPATH = "xpath"
    CSS = "css"
    ID = "id"
    TEXT = "text"


class Locator(BaseModel):
    """Immutable (strategy, selector) pair identifying a DOM element."""

    model_config = ConfigDict(frozen=True)

    strategy: SelectorStrategy = Field(description="Selector strategy")
    value: str = Field(min_length=1, description="Selector string interpreted by the strategy")

    @classmethod
    def xpath(cls, value: str) -> "Locator":
        return cls(strategy=SelectorStrategy.XPATH, value=value)

    @classmethod
    def css(cls, value: str) -> "Locator":
        return cls(strategy=SelectorStrategy.CSS, value=value)

    @property
    def selector(self) -> str:
        """Playwright selector string, e.g. ``xpath=//div``."""
        return f"{self.strategy.value}={self.value}"

    def resolve(self, driver: Any) -> Any:
        """Return the driver's lazy locator for this element."""
        return driver.locator(self.selector)
