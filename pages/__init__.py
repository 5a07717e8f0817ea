"""Page objects for the system under test."""

from .home import HomePage
from .locators import Locator, SelectorStrategy
from .utils import prepare_xpath_string

__all__ = [
    "HomePage",
    "Locator",
    "SelectorStrategy",
    "prepare_xpath_string",
]
