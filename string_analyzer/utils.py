import hashlib
import re
from collections import Counter
from typing import Any, Callable, Dict, List, Optional, Tuple

from string_analyzer.schemas import StringProperties

def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()

def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, ignoring whitespace)"""
    cleaned = re.sub(r"\s+", "", text.lower())
    return cleaned == cleaned[::-1]

def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))

def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())

def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))

def analyze_string(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=get_character_frequency(value),
    )


# Each rule looks at the lowercased query and returns (key, value) or None.
# Rules are independent; every match contributes to the filter set.
Rule = Callable[[str], Optional[Tuple[str, Any]]]

def _keyword_rule(key: str, value: Any, *phrases: str) -> Rule:
    def rule(query: str) -> Optional[Tuple[str, Any]]:
        if any(phrase in query for phrase in phrases):
            return key, value
        return None
    return rule

def _pattern_rule(key: str, pattern: str, convert: Callable[[str], Any]) -> Rule:
    compiled = re.compile(pattern, re.ASCII)

    def rule(query: str) -> Optional[Tuple[str, Any]]:
        match = compiled.search(query)
        if match:
            return key, convert(match.group(1))
        return None
    return rule

NATURAL_LANGUAGE_RULES: List[Rule] = [
    _keyword_rule("is_palindrome", True, "palindromic", "palindrome"),
    _keyword_rule("word_count", 1, "single word", "word_count=1"),
    _pattern_rule("min_length", r"longer than (\d+)", int),
    _pattern_rule("contains_character", r"contains the letter ([a-z0-9])", str),
]

def parse_natural_language_query(query: str) -> Dict[str, Any]:
    """
    Parse natural language query into filter parameters
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 10}
    - "strings that contains the letter z" -> {contains_character: "z"}
    Unrecognized text is ignored.
    """
    query = query.lower()
    filters: Dict[str, Any] = {}

    for rule in NATURAL_LANGUAGE_RULES:
        result = rule(query)
        if result is not None:
            key, value = result
            filters[key] = value

    return filters
