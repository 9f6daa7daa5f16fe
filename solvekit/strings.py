"""String problems: stacks, two pointers, sliding windows, palindromes and tries."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, MutableSequence

_VOWELS = frozenset("aeiou")
_END = "\0end"


def remove_adjacent_duplicates(s: str) -> str:
    """Repeatedly drop pairs of equal neighbouring characters."""
    kept: list[str] = []
    for ch in s:
        if kept and kept[-1] == ch:
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def equal_substring(s: str, t: str, max_cost: int) -> int:
    """Longest stretch where turning ``s`` into ``t`` costs at most ``max_cost``.

    Changing one character costs the distance between the two code points.
    """
    if len(s) != len(t):
        raise ValueError("s and t must have the same length")
    costs = [abs(ord(a) - ord(b)) for a, b in zip(s, t)]
    left = 0
    window = 0
    best = 0
    for right, cost in enumerate(costs):
        window += cost
        while window > max_cost and left <= right:
            window -= costs[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def num_steps(s: str) -> int:
    """Steps to bring a binary number to 1 by halving evens and incrementing odds."""
    if not s:
        raise ValueError("s must not be empty")
    steps = len(s) - 1
    carry = 0
    for ch in reversed(s[1:]):
        if int(ch) + carry == 1:
            steps += 1
            carry = 1
    return steps + carry


def _strip_pairs(text: str, first: str, second: str, points: int) -> tuple[str, int]:
    stack: list[str] = []
    score = 0
    for ch in text:
        if stack and stack[-1] == first and ch == second:
            stack.pop()
            score += points
        else:
            stack.append(ch)
    return "".join(stack), score


def maximum_gain(s: str, x: int, y: int) -> int:
    """Most points from removing "ab" (worth ``x``) and "ba" (worth ``y``)."""
    if x > y:
        passes = (("a", "b", x), ("b", "a", y))
    else:
        passes = (("b", "a", y), ("a", "b", x))
    total = 0
    for first, second, points in passes:
        s, gained = _strip_pairs(s, first, second, points)
        total += gained
    return total


def remove_occurrences(s: str, part: str) -> str:
    """Remove the leftmost ``part`` again and again until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def decode_message(key: str, message: str) -> str:
    """Decode ``message`` with the substitution table given by ``key``.

    The first distinct non-space characters of ``key`` stand for ``a``, ``b``, ...
    in turn; spaces in the message stay spaces.
    """
    table: dict[str, str] = {}
    for ch in key:
        if ch != " " and ch not in table:
            table[ch] = chr(ord("a") + len(table))
    decoded = []
    for ch in message:
        if ch == " ":
            decoded.append(" ")
        elif ch in table:
            decoded.append(table[ch])
        else:
            raise ValueError(f"character {ch!r} does not appear in the key")
    return "".join(decoded)


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return Counter(s) == Counter(t)


def append_characters(s: str, t: str) -> int:
    """How many characters must be appended to ``s`` for ``t`` to be a subsequence."""
    matched = 0
    for ch in s:
        if matched == len(t):
            break
        if ch == t[matched]:
            matched += 1
    return len(t) - matched


def score_of_string(s: str) -> int:
    """Sum of absolute code-point differences between neighbouring characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in zip(s, s[1:]))


def reverse_string(s: MutableSequence[str]) -> None:
    """Reverse a list of characters in place."""
    s.reverse()


def _is_vowel(ch: str) -> bool:
    return ch.lower() in _VOWELS


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels only."""
    chars = list(s)
    low, high = 0, len(chars) - 1
    while low < high:
        if not _is_vowel(chars[low]):
            low += 1
        elif not _is_vowel(chars[high]):
            high -= 1
        else:
            chars[low], chars[high] = chars[high], chars[low]
            low += 1
            high -= 1
    return "".join(chars)


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome that can be built from the characters."""
    unpaired: set[str] = set()
    length = 0
    for ch in s:
        if ch in unpaired:
            unpaired.remove(ch)
            length += 2
        else:
            unpaired.add(ch)
    return length + 1 if unpaired else length


def _expand(s: str, left: int, right: int) -> int:
    count = 0
    while left >= 0 and right < len(s) and s[left] == s[right]:
        count += 1
        left -= 1
        right += 1
    return count


def count_substrings(s: str) -> int:
    """Number of palindromic substrings, counted by position."""
    return sum(
        _expand(s, center, center) + _expand(s, center, center + 1)
        for center in range(len(s))
    )


def _build_trie(words: Iterable[str]) -> dict:
    root: dict = {}
    for word in words:
        node = root
        for ch in word:
            node = node.setdefault(ch, {})
        node[_END] = True
    return root


def _shortest_root(trie: dict, word: str) -> str:
    node = trie
    for index, ch in enumerate(word):
        child = node.get(ch)
        if child is None:
            return word
        if _END in child:
            return word[: index + 1]
        node = child
    return word


def replace_words(dictionary: Iterable[str], sentence: str) -> str:
    """Replace each word by the shortest dictionary root it starts with."""
    trie = _build_trie(dictionary)
    return " ".join(_shortest_root(trie, word) for word in sentence.split())


def _is_palindrome_between(s: str, i: int, j: int) -> bool:
    while i <= j:
        if s[i] != s[j]:
            return False
        i += 1
        j -= 1
    return True


def valid_palindrome(s: str) -> bool:
    """Tell whether ``s`` is a palindrome after deleting at most one character."""
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return _is_palindrome_between(s, i + 1, j) or _is_palindrome_between(
                s, i, j - 1
            )
        i += 1
        j -= 1
    return True


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def reverse_only_letters(s: str) -> str:
    """Reverse the ASCII letters, leaving every other character where it is."""
    chars = list(s)
    low, high = 0, len(chars) - 1
    while low <= high:
        if not _is_letter(chars[low]):
            low += 1
        elif not _is_letter(chars[high]):
            high -= 1
        else:
            chars[low], chars[high] = chars[high], chars[low]
            low += 1
            high -= 1
    return "".join(chars)