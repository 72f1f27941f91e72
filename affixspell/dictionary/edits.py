"""Edit-distance candidate generation."""

from typing import Callable, Iterable


def edits1(words: Iterable[str], alphabet: str) -> list[str]:
    """All strings one edit away from each word.

    Edits are deletions, transpositions of adjacent differing characters,
    replacements and insertions over the given alphabet. The result keeps
    duplicates: each entry is one edit path.
    """
    results = []

    for word in words:
        for i in range(len(word) + 1):
            left, right = word[:i], word[i:]

            if right:
                results.append(left + right[1:])

            if len(right) > 1 and right[0] != right[1]:
                results.append(left + right[1] + right[0] + right[2:])

            if right:
                for char in alphabet:
                    if char != right[0]:
                        results.append(left + char + right[1:])

            for char in alphabet:
                results.append(left + char + right)

    return results


def find_similar_words(
    word: str,
    max_distance: int,
    alphabet: str,
    is_known: Callable[[str], bool],
) -> list[str]:
    """Known words within max_distance edits of a word.

    Each distance ring is generated from the full previous ring, and only
    known strings are kept in the result. Strings reachable by several edit
    paths appear several times.

    Args:
        word: The misspelling
        max_distance: Number of edit rounds
        alphabet: Characters used for replacements and insertions
        is_known: Predicate deciding whether a generated string is a word

    Returns:
        Known candidates in generation order, nearest ring first
    """
    results = []
    ring = [word]

    for _ in range(max_distance):
        ring = edits1(ring, alphabet)
        results.extend(candidate for candidate in ring if is_known(candidate))

    return results
