from enum import Enum


class DefaultAction(str, Enum):
    copy = "copy"
    open = "open"
    browser = "browser"


class ActionKind(str, Enum):
    copy = "copy"
    open = "open"
    browser = "browser"


class BrowserMode(str, Enum):
    search = "search"
    trending = "trending"


class SuggestionKind(str, Enum):
    autocomplete = "autocomplete"
    related = "related"
