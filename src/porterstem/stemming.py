"""
This module contains classes for stemming purpose.
"""

import logging
import re
import os
from porterstem.rules import Context, SimplifiedContext, validate_word
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

Dictionary = set[str]


class Stemmer:
    """
    English sentence stemmer.

    Porter Stemmer, with the later revisions of step 2 (bli, logi).
    @link https://tartarus.org/martin/PorterStemmer/
    """

    def __init__(self, stopwords: Optional[Dictionary] = None):

        current_dir = os.path.dirname(os.path.realpath(__file__))
        err_msg = "{} is missing. It seems that your installation is corrupted"

        if stopwords is None:
            try:
                filepath = "/data/stopwords.txt"
                with open(current_dir + filepath, "r") as file:
                    words = file.read().split("\n")
                    self.stopwords = set(words)
            except FileNotFoundError:
                raise RuntimeError(err_msg.format(filepath)) from None
            logger.debug("Loaded %d stop words from %s", len(self.stopwords), filepath)
        else:
            self.stopwords = stopwords

        self._cache: dict[str, str] = dict()

    def stem(self, text: str) -> str:
        """
        Stem a text string to its common stem form.
        """

        return " ".join(self.stem_words(self.tokenize(text)))

    def tokenize(self, text: str) -> list[str]:
        """
        Lowercase text and split it into words of letters a-z.
        """

        if type(text) != str:
            raise TypeError("text must be a string!")

        # normalize_text
        result = text.lower()
        result = re.sub(r"[^a-z ]", " ", result, flags=re.MULTILINE)
        result = re.sub(r"( +)", " ", result, flags=re.MULTILINE)
        return result.strip().split(" ")

    def stem_words(self, words: Iterable[str]) -> list[str]:
        """
        Stem each word of a sequence, preserving order.
        """

        stems = list()

        for word in words:
            if word not in self._cache:
                self._cache[word] = self.context(word)[0]
            stems.append(self._cache[word])

        return stems

    def remove_stopword(self, text: str) -> str:
        """
        Remove stop words from a text string.
        """

        if type(text) != str:
            raise TypeError("text must be a string!")

        words = text.lower().split(" ")
        stopped_words = [w for w in words if w not in self.stopwords]

        return " ".join(stopped_words)

    def context(self, word: str) -> SimplifiedContext:
        """
        Return simplified Context of the word.
        """

        validate_word(word)

        t = Context(word)
        removals = [(r.step, r.subject, r.result) for r in t.removals]
        return t.result, removals
