"""String puzzles: palindromes, compression, permutations, brackets."""

from collections import Counter
from itertools import groupby

_OPERATORS = frozenset("+-*/")


def _normalise(ch):
    if ch.isascii() and ch.isalnum():
        return ch.lower()
    return None


def is_alnum_palindrome(text):
    """Tell whether text reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [c for c in map(_normalise, text) if c is not None]
    return cleaned == cleaned[::-1]


def compress(text):
    """Run-length encode text, writing a count only for runs longer than one."""
    parts = []
    for ch, run in groupby(text):
        count = sum(1 for _ in run)
        parts.append(ch if count == 1 else f"{ch}{count}")
    return "".join(parts)


def subsequences(values):
    """Return every subsequence of values in depth-first order, the empty one first."""
    items = list(values)
    result = []

    def build(start, current):
        result.append(list(current))
        for index in range(start, len(items)):
            current.append(items[index])
            build(index + 1, current)
            current.pop()

    build(0, [])
    return result


def remove_occurrences(text, part):
    """Repeatedly delete the leftmost occurrence of part until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in text:
        index = text.index(part)
        text = text[:index] + text[index + len(part):]
    return text


def max_occurring_char(text):
    """Return the most frequent letter (lower case, case-insensitive); ties go to the earliest letter."""
    if not text:
        raise ValueError("text must not be empty")
    if not all(ch.isascii() and ch.isalpha() for ch in text):
        raise ValueError("text must contain only ASCII letters")
    counts = Counter(text.lower())
    return min(counts, key=lambda ch: (-counts[ch], ch))


def smallest_palindrome(text):
    """Turn text into a palindrome by lowering the larger of each mirrored pair."""
    chars = list(text)
    half = len(chars) // 2
    for front in range(half):
        back = len(chars) - 1 - front
        chars[front] = chars[back] = min(chars[front], chars[back])
    return "".join(chars)


def is_palindrome(text):
    """Tell whether text reads the same forwards and backwards."""
    return text == text[::-1]


def contains_permutation(pattern, text):
    """Tell whether some permutation of pattern occurs as a substring of text."""
    width = len(pattern)
    if width > len(text):
        return False
    wanted = Counter(pattern)
    window = Counter(text[:width])
    if window == wanted:
        return True
    for old, new in zip(text, text[width:]):
        window[old] -= 1
        if not window[old]:
            del window[old]
        window[new] += 1
        if window == wanted:
            return True
    return False


def permutations(text):
    """Return all orderings of text's characters, generated by successive swaps."""
    chars = list(text)
    result = []

    def permute(index):
        if index >= len(chars) - 1:
            result.append("".join(chars))
            return
        for other in range(index, len(chars)):
            chars[index], chars[other] = chars[other], chars[index]
            permute(index + 1)
            chars[index], chars[other] = chars[other], chars[index]

    if chars:
        permute(0)
    return result


def has_redundant_brackets(expression):
    """Tell whether a pair of brackets encloses no operator."""
    stack = []
    for ch in expression:
        if ch == "(" or ch in _OPERATORS:
            stack.append(ch)
        elif ch == ")":
            redundant = True
            while stack and stack[-1] != "(":
                redundant = False
                stack.pop()
            if not stack:
                raise ValueError("unbalanced closing bracket")
            stack.pop()
            if redundant:
                return True
    return False


def remove_adjacent_duplicates(text):
    """Repeatedly remove pairs of equal adjacent characters."""
    stack = []
    for ch in text:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def replace_spaces(text, replacement):
    """Replace every space in text with replacement."""
    return text.replace(" ", replacement)


def reverse(text):
    """Return text reversed."""
    return text[::-1]