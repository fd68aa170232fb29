"""fixread - page through text with bionic-reading fixation points."""

from .errors import FixreadError, InvalidViewport, IndexOutOfRange, NoMatch, InvalidInsertionIndex
from .text import CodepointText
from .pagination import Page, PageTable, Viewport, paginate
from .search import Occurrence, SearchIndex
from .fixation import EmphasisStyle, WordSpan, segment
from .session import ReadingSession, SearchMode

__all__ = [
    'FixreadError',
    'InvalidViewport',
    'IndexOutOfRange',
    'NoMatch',
    'InvalidInsertionIndex',
    'CodepointText',
    'Page',
    'PageTable',
    'Viewport',
    'paginate',
    'Occurrence',
    'SearchIndex',
    'EmphasisStyle',
    'WordSpan',
    'segment',
    'ReadingSession',
    'SearchMode',
]
