"""
The Porter suffix stripping algorithm for English words.
"""

from porterstem.rules import InvalidWordError, cv_map, measure, stem, stem_words
from porterstem.stemming import Stemmer

__version__ = "0.1.0"
