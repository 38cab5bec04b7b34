from topic_census.driver.base import Extractor, LoadCondition, PageDriver
from topic_census.driver.browser import PlaywrightDriver
from topic_census.driver.static import StaticDriver

__all__ = [
    "Extractor",
    "LoadCondition",
    "PageDriver",
    "PlaywrightDriver",
    "StaticDriver",
]
