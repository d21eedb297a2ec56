"""Turn raw whitespace-delimited tokens into index keywords."""

from littlesearch.data_models.noise_words import NoiseWords

PUNCTUATION = ".,?:;!"


def strip_trailing_punctuation(word: str) -> str:
    """Drop trailing punctuation, never shortening the word below one character.

    strip_trailing_punctuation("fast!?")  -> "fast"
    strip_trailing_punctuation("?!")      -> "?"
    """
    while len(word) > 1 and word[-1] in PUNCTUATION:
        word = word[:-1]
    return word


def get_keyword(word: str, noise_words: NoiseWords) -> str | None:
    """Return the lowercase keyword for a raw token, or None if it is not one.

    A keyword is a token that, once trimmed and stripped of trailing
    punctuation, consists only of letters and is not a noise word.
    """
    word = strip_trailing_punctuation(word.strip()).lower()
    if word in noise_words:
        return None
    if not word.isalpha():
        return None
    return word
