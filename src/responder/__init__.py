"""
Keyword Responder
Canned responses triggered by keywords, with random default replies
"""

from .config import ResponderConfig, load_config
from .loader import LoadError, LoadErrorKind
from .observability import SelectionRecord
from .responder import Responder
from .words import split_words

__all__ = [
    'Responder', 'ResponderConfig', 'load_config',
    'LoadError', 'LoadErrorKind', 'SelectionRecord', 'split_words',
]
