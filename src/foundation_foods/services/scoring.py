"""Relevance scoring of food descriptions against a search query."""

_STRIPPED_CHARS = str.maketrans("", "", ",.()")

_EXACT_MATCH_SCORE = 1000.0
_PREFIX_MATCH_SCORE = 500.0
_SUBSTRING_MATCH_SCORE = 100.0

_WORD_EXACT_SCORE = 50.0
_WORD_PREFIX_SCORE = 25.0
_WORD_SUBSTRING_SCORE = 10.0
_POSITION_BONUS_WORDS = 3

_LONG_DESCRIPTION_WORDS = 10
_LONG_DESCRIPTION_PENALTY = 0.8

_SIMPLE_NAME_MAX_WORDS = 3
_SIMPLE_NAME_BOOST = 1.5
_MEAT_WORDS = frozenset({"chicken", "beef", "pork"})
_BRAND_INDICATORS = ("brand", "store", "composite", "mixed", "frozen", "canned")
_BRANDED_MIN_WORDS = 6
_BRANDED_PENALTY = 0.7


def normalize_text(text: str) -> str:
    """Lower-case, trim and drop punctuation that carries no meaning."""
    return text.lower().strip().translate(_STRIPPED_CHARS)


def split_words(normalized: str) -> list[str]:
    return normalized.split()


def score_description(
    description: str, normalized_query: str, query_words: list[str]
) -> float:
    """Score how relevant a food description is to a normalized query.

    Zero means the description does not match and should be excluded.
    """
    normalized_desc = normalize_text(description)
    desc_words = split_words(normalized_desc)
    if not query_words or not desc_words:
        return 0.0

    score = 0.0
    if normalized_desc == normalized_query:
        score += _EXACT_MATCH_SCORE
    if normalized_desc.startswith(normalized_query):
        score += _PREFIX_MATCH_SCORE
    if normalized_query in normalized_desc:
        score += _SUBSTRING_MATCH_SCORE

    matched_words = 0
    for query_word in query_words:
        best = _best_word_score(query_word, desc_words)
        if best > 0:
            matched_words += 1
            score += best

    if matched_words == 0:
        return 0.0

    total_words = len(query_words)
    if total_words > 1:
        score *= 1 + matched_words / total_words

    if len(desc_words) > _LONG_DESCRIPTION_WORDS and matched_words < total_words:
        score *= _LONG_DESCRIPTION_PENALTY

    return _adjust_for_food_context(normalized_desc, desc_words, query_words, score)


def _best_word_score(query_word: str, desc_words: list[str]) -> float:
    best = 0.0
    for index, desc_word in enumerate(desc_words):
        in_lead = index < _POSITION_BONUS_WORDS
        if desc_word == query_word:
            word_score = _WORD_EXACT_SCORE
            if in_lead:
                word_score += (_POSITION_BONUS_WORDS - index) * 10
        elif len(query_word) >= 3 and desc_word.startswith(query_word):
            word_score = _WORD_PREFIX_SCORE
            if in_lead:
                word_score += (_POSITION_BONUS_WORDS - index) * 5
        elif len(query_word) >= 4 and query_word in desc_word:
            word_score = _WORD_SUBSTRING_SCORE
        else:
            continue
        best = max(best, word_score)
    return best


def _adjust_for_food_context(
    normalized_desc: str, desc_words: list[str], query_words: list[str], score: float
) -> float:
    """Apply food specific boosts and penalties."""
    single_word = len(query_words) == 1

    # Short generic names like "Eggs, whole" should beat long variants.
    if (
        single_word
        and len(desc_words) <= _SIMPLE_NAME_MAX_WORDS
        and query_words[0] in desc_words[0]
    ):
        score *= _SIMPLE_NAME_BOOST

    for query_word in query_words:
        if query_word == "milk":
            if normalized_desc.startswith("milk"):
                score *= 2.0
            elif "milkfat" in normalized_desc or "milk fat" in normalized_desc:
                score *= 0.3
        elif query_word == "cheese":
            if normalized_desc.startswith("cheese"):
                score *= 1.5
        elif query_word in _MEAT_WORDS:
            if normalized_desc.startswith(query_word):
                score *= 1.3
        elif query_word == "bread":
            if "bread" in normalized_desc:
                score *= 1.2

    if single_word and len(desc_words) > _BRANDED_MIN_WORDS:
        if any(indicator in normalized_desc for indicator in _BRAND_INDICATORS):
            score *= _BRANDED_PENALTY

    return score
