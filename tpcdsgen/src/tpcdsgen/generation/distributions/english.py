"""Pseudo-English text built from the word distributions."""

from tpcdsgen.generation.random.stream import RandomNumberStream
from tpcdsgen.generation.random.values import generate_uniform_random_int
from . import get_distribution

# Sentence template token -> word distribution
WORD_CLASSES = {
    "N": "nouns",
    "V": "verbs",
    "J": "adjectives",
    "D": "adverbs",
    "X": "auxiliaries",
    "P": "prepositions",
    "A": "articles",
    "T": "terminators",
}


def generate_random_sentence(stream: RandomNumberStream) -> str:
    """Pick a template, then one word per token; draws ``1 + tokens`` times."""
    template = get_distribution("sentences").pick_random_value("frequency", stream)
    sentence = ""
    for token in template.split():
        word = get_distribution(WORD_CLASSES[token]).pick_random_value("frequency", stream)
        if token == "T" or not sentence:
            sentence += word
        else:
            sentence += " " + word
    return sentence


def generate_random_text(min_length: int, max_length: int, stream: RandomNumberStream) -> str:
    """
    Generate text of a random length between the bounds.

    Whole sentences are appended until the target length is reached; the
    last one is cut to fit. A sentence following a terminator starts with a
    capital letter.
    """
    target_length = generate_uniform_random_int(min_length, max_length, stream)
    is_sentence_beginning = True
    parts = []
    while target_length > 0:
        generated = generate_random_sentence(stream)
        if is_sentence_beginning:
            generated = generated[:1].upper() + generated[1:]
        generated_length = len(generated)
        is_sentence_beginning = generated.endswith(".")
        if target_length <= generated_length:
            generated = generated[:target_length]
        parts.append(generated)
        target_length -= generated_length
        if target_length > 0:
            parts.append(" ")
            target_length -= 1
    return "".join(parts)


def generate_word(seed: int, max_chars: int, distribution_name: str = "syllables") -> str:
    """
    Spell ``seed`` in the mixed radix of a syllable distribution.

    No stream is involved; equal seeds always give equal words.
    """
    distribution = get_distribution(distribution_name)
    size = distribution.size
    word = ""
    while seed > 0:
        syllable = distribution.get_value_for_index_mod_size(seed)
        seed //= size
        if len(word) + len(syllable) > max_chars:
            break
        word += syllable
    return word
