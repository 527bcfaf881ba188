from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
import logging
import re

from string_analyzer.exceptions import InvalidFilter, InvalidType, MissingField, NotFound
from string_analyzer.schemas import StringCreate, StringResponse
from string_analyzer.store import StringStore
from string_analyzer.utils import analyze_string, compute_sha256

logger = logging.getLogger(__name__)

NUMERIC_FILTERS = ("min_length", "max_length", "word_count")
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

def validate_string_value(string_data: StringCreate) -> str:
    """Return the submitted value, or raise MissingField / InvalidType"""
    if "value" not in string_data.model_fields_set:
        raise MissingField()
    if not isinstance(string_data.value, str):
        raise InvalidType()
    return string_data.value

def create_string_analysis(store: StringStore, value: str) -> StringResponse:
    """Create a new string analysis"""
    properties = analyze_string(value)

    record = StringResponse(
        id=properties.sha256_hash,
        value=value,
        properties=properties,
        created_at=datetime.now(timezone.utc),
    )

    store.add(record)
    logger.info(f'Analyzed new string: "{value}"')
    return record

def get_string_by_value(store: StringStore, value: str) -> StringResponse:
    """Get string analysis by its original value"""
    record = store.get(compute_sha256(value))
    if record is None:
        raise NotFound()
    return record

def parse_list_filters(params: Mapping[str, str]) -> Dict[str, Any]:
    """
    Turn raw query parameters into a filter set.

    is_palindrome is true only for the literal "true". Numeric filters must
    parse as integers or the whole request is rejected. contains_character
    is dropped unless it is exactly one character.
    """
    filters: Dict[str, Any] = {}

    if params.get("is_palindrome") is not None:
        filters["is_palindrome"] = params["is_palindrome"] == "true"

    for key in NUMERIC_FILTERS:
        raw = params.get(key)
        if raw is None:
            continue
        if not INTEGER_PATTERN.fullmatch(raw):
            logger.warning(f"Rejected filter {key}={raw!r}")
            raise InvalidFilter()
        filters[key] = int(raw)

    character = params.get("contains_character")
    if character is not None and len(character) == 1:
        filters["contains_character"] = character

    return filters

def get_all_strings(
    store: StringStore,
    is_palindrome: Optional[bool] = None,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    word_count: Optional[int] = None,
    contains_character: Optional[str] = None
) -> List[StringResponse]:
    """Get all strings with optional filters"""
    results = store.all()

    if is_palindrome is not None:
        results = [s for s in results if s.properties.is_palindrome == is_palindrome]

    if min_length is not None:
        results = [s for s in results if s.properties.length >= min_length]

    if max_length is not None:
        results = [s for s in results if s.properties.length <= max_length]

    if word_count is not None:
        results = [s for s in results if s.properties.word_count == word_count]

    if contains_character is not None:
        # Check if character exists in value
        results = [s for s in results if contains_character in s.value]

    return results

def filter_by_parsed_query(store: StringStore, filters: Dict[str, Any]) -> List[StringResponse]:
    """Apply a natural-language filter set; is_palindrome only narrows when true"""
    return get_all_strings(
        store,
        is_palindrome=True if filters.get("is_palindrome") else None,
        min_length=filters.get("min_length"),
        word_count=filters.get("word_count"),
        contains_character=filters.get("contains_character")
    )

def delete_string(store: StringStore, value: str) -> None:
    """Delete string analysis by value"""
    store.remove(compute_sha256(value))
    logger.info(f'Deleted string: "{value}"')
