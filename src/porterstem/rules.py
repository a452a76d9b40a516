"""
This module contains all stemming rules.
"""

import logging
import re
from typing import Callable, Sequence
from collections import namedtuple

logger = logging.getLogger(__name__)

Removal = namedtuple("Removal", "subject result step")
SuffixRule = tuple[str, str]
SimplifiedContext = tuple[str, list[tuple[str, str, str]]]


class InvalidWordError(ValueError):
    """
    Raised when a word contains characters other than lowercase ASCII letters.
    """

    def __init__(self, word: str):
        super().__init__("word must only contain lowercase letters a-z: {!r}".format(word))
        self.word = word


STEP_1A_RULES: Sequence[SuffixRule] = (
    (r"sses$", "ss"),
    (r"ies$", "i"),
    (r"ss$", "ss"),
    (r"s$", ""),
)

STEP_1B_RULES: Sequence[SuffixRule] = (
    (r"eed$", "ee"),
    (r"ed$", ""),
    (r"ing$", ""),
)

STEP_1B_EXTRA_RULES: Sequence[SuffixRule] = (
    (r"at$", "ate"),
    (r"bl$", "ble"),
    (r"iz$", "ize"),
)

STEP_1C_RULES: Sequence[SuffixRule] = ((r"y$", "i"),)

# abli -> able of the 1979 paper is replaced by bli -> ble, logi -> log is new.
STEP_2_RULES: Sequence[SuffixRule] = (
    (r"ational$", "ate"),
    (r"tional$", "tion"),
    (r"enci$", "ence"),
    (r"anci$", "ance"),
    (r"izer$", "ize"),
    (r"bli$", "ble"),
    (r"alli$", "al"),
    (r"entli$", "ent"),
    (r"eli$", "e"),
    (r"ousli$", "ous"),
    (r"ization$", "ize"),
    (r"ation$", "ate"),
    (r"ator$", "ate"),
    (r"alism$", "al"),
    (r"iveness$", "ive"),
    (r"fulness$", "ful"),
    (r"ousness$", "ous"),
    (r"aliti$", "al"),
    (r"iviti$", "ive"),
    (r"biliti$", "ble"),
    (r"logi$", "log"),
)

STEP_3_RULES: Sequence[SuffixRule] = (
    (r"icate$", "ic"),
    (r"ative$", ""),
    (r"alize$", "al"),
    (r"iciti$", "ic"),
    (r"ical$", "ic"),
    (r"ful$", ""),
    (r"ness$", ""),
)

STEP_4_RULES: Sequence[SuffixRule] = (
    (r"al$", ""),
    (r"ance$", ""),
    (r"ence$", ""),
    (r"er$", ""),
    (r"ic$", ""),
    (r"able$", ""),
    (r"ible$", ""),
    (r"ant$", ""),
    (r"ement$", ""),
    (r"ment$", ""),
    (r"ent$", ""),
    (r"ion$", ""),
    (r"ou$", ""),
    (r"ism$", ""),
    (r"ate$", ""),
    (r"iti$", ""),
    (r"ous$", ""),
    (r"ive$", ""),
    (r"ize$", ""),
)

STEP_5A_RULES: Sequence[SuffixRule] = ((r"e$", ""),)


def cv_map(word: str) -> str:
    """
    Map every letter of word to C (consonant) or V (vowel).

    The letter y is a vowel only when it follows a consonant:
    tree -> CCVV, syzygy -> CVCVCV, abaya -> VCVCV.
    """

    cv = ""
    for char in word:
        if char in "aeiou" or (char == "y" and cv.endswith("C")):
            cv += "V"
        else:
            cv += "C"
    return cv


def measure(cv: str) -> int:
    """
    Count the VC sequences of a CV string, m in [C](VC){m}[V].

    CVCCVC -> 2, CVCCVCVCVCC -> 4.
    """

    return cv.count("VC")


def match_rules(word: str, rules: Sequence[SuffixRule]) -> tuple[str, str, bool]:
    """
    Apply the first rule whose pattern matches word.

    Return the bare stem (the matched suffix removed), the word with the
    suffix replaced, and whether any rule matched. Later rules are never
    tried once one has matched.
    """

    for pattern, replacement in rules:
        matches = re.search(pattern, word)
        if matches:
            stem = word[: matches.start()] + word[matches.end() :]
            result = word[: matches.start()] + replacement + word[matches.end() :]
            return stem, result, True
    return word, word, False


def contains_vowel(stem: str) -> bool:
    """
    *v* - the stem contains a vowel.
    """

    return "V" in cv_map(stem)


def step_1a(word: str) -> str:
    """
    Remove plurals.

    SSES -> SS, IES -> I, SS -> SS, S ->
    """

    _, result, _ = match_rules(word, STEP_1A_RULES)
    return result


def step_1b(word: str) -> str:
    """
    Remove past tense and gerund endings.

    (m > 0) EED -> EE
    (*v*) ED ->
    (*v*) ING ->
    """

    stem, result, matched = match_rules(word, STEP_1B_RULES)
    if not matched:
        return word

    cv = cv_map(stem)
    if word.endswith("eed"):
        if measure(cv) > 0:
            return result
        return word

    if "V" not in cv:
        return word
    return step_1b_extra(stem, cv, measure(cv))


def step_1b_extra(stem: str, cv: str, m: int) -> str:
    """
    Tidy up a stem after ED or ING was removed in step 1b.

    AT -> ATE, BL -> BLE, IZ -> IZE
    (*d and not (*L or *S or *Z)) -> single letter
    (m = 1 and *o) -> E
    """

    _, result, matched = match_rules(stem, STEP_1B_EXTRA_RULES)
    if matched:
        return result

    if cv.endswith("CC") and stem[-1] not in "lsz":
        return stem[:-1]

    if m == 1 and cv.endswith("CVC") and stem[-1] not in "wxy":
        return stem + "e"

    return stem


def step_1c(word: str) -> str:
    """
    (*v*) Y -> I
    """

    stem, result, matched = match_rules(word, STEP_1C_RULES)
    if matched and contains_vowel(stem):
        return result
    return word


def _measure_guarded(word: str, rules: Sequence[SuffixRule], threshold: int) -> str:
    stem, result, matched = match_rules(word, rules)
    if matched and measure(cv_map(stem)) > threshold:
        return result
    return word


def step_2(word: str) -> str:
    """
    (m > 0) ATIONAL -> ATE, TIONAL -> TION, ... LOGI -> LOG
    """

    return _measure_guarded(word, STEP_2_RULES, 0)


def step_3(word: str) -> str:
    """
    (m > 0) ICATE -> IC, ATIVE -> , ... NESS ->
    """

    return _measure_guarded(word, STEP_3_RULES, 0)


def step_4(word: str) -> str:
    """
    Remove residual derivational suffixes.

    (m > 1) AL -> , ANCE -> , ... IZE ->
    (m > 1 and (*S or *T)) ION ->
    """

    stem, result, matched = match_rules(word, STEP_4_RULES)
    if not matched or measure(cv_map(stem)) <= 1:
        return word

    if word.endswith("ion") and stem[-1] not in "st":
        return word
    return result


def step_5a(word: str) -> str:
    """
    (m > 1) E ->
    (m = 1 and not *o) E ->
    """

    stem, result, matched = match_rules(word, STEP_5A_RULES)
    if not matched:
        return word

    cv = cv_map(stem)
    m = measure(cv)
    if m > 1 or (m == 1 and not cv.endswith("CVC")):
        return result
    return word


def step_5b(word: str) -> str:
    """
    (m > 1 and *d and *L) -> single letter

    Checked against the word itself, no suffix is stripped here.
    """

    cv = cv_map(word)
    if measure(cv) > 1 and cv.endswith("CC") and word.endswith("l"):
        return word[:-1]
    return word


class Context:
    """
    Stemming Context using the Porter algorithm.

    M.F. Porter (1980) "An algorithm for suffix stripping", Program 14(3), 130-137.
    @link https://tartarus.org/martin/PorterStemmer/def.txt
    """

    def __init__(self, original_word: str):

        self.process_is_stopped = False
        self.original_word = original_word
        self.current_word = original_word
        self.result = ""
        self.removals: list[Removal] = []

        self._start_stemming_process()
        self.result = self.current_word

    def stop_process(self) -> None:
        """
        Stop stemming process.
        """
        self.process_is_stopped = True

    def add_removal(self, removal: Removal) -> None:
        """
        Add Removal information to removals.
        """
        self.removals.append(removal)

    def _start_stemming_process(self) -> None:

        VISITORS: list[Rule] = [DontStemShortWord]
        self.accept_visitors(VISITORS)
        if self.process_is_stopped:
            return

        # step 1a - 5b
        self.accept_visitors(StemmingSteps())

    def accept_visitors(self, visitors: list["Rule"]) -> None:
        """
        Accept visitors rules, in order, until one stops the process.
        """
        for visitor in visitors:
            visitor(self)
            if self.process_is_stopped:
                return None
        return None


Rule = Callable[[Context], None]
Step = Callable[[str], str]


class StepVisitor:
    """
    Wrapper turning a step function into a Context visitor.
    """

    def __init__(self, name: str, step: Step):
        self.name = name
        self.step = step

    def visit(self, context: Context) -> None:
        """
        Run the step on the current word and record a removal if it fired.
        """

        result = self.step(context.current_word)
        if result == context.current_word:
            return None

        logger.debug("step %s: %s -> %s", self.name, context.current_word, result)
        context.add_removal(Removal(context.current_word, result, self.name))
        context.current_word = result
        return None


def DontStemShortWord(context: Context) -> None:
    """
    Stop stemming process if word length is less than 3.
    """

    if len(context.current_word) <= 2:
        context.stop_process()


STEPS: Sequence[tuple[str, Step]] = (
    ("1a", step_1a),
    ("1b", step_1b),
    ("1c", step_1c),
    ("2", step_2),
    ("3", step_3),
    ("4", step_4),
    ("5a", step_5a),
    ("5b", step_5b),
)


def StemmingSteps() -> list[Rule]:
    return [StepVisitor(name, step).visit for name, step in STEPS]


def validate_word(word: str) -> None:
    """
    Raise if word is not a string of lowercase letters a-z.
    """

    if type(word) != str:
        raise TypeError("word must be a string!")
    if not re.fullmatch(r"[a-z]*", word):
        raise InvalidWordError(word)


def stem(word: str) -> str:
    """
    Stem a single lowercase word.
    """

    validate_word(word)
    return Context(word).result


def stem_words(words: Sequence[str]) -> list[str]:
    """
    Stem every word, preserving order.
    """

    return [stem(word) for word in words]
