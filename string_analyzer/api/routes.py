from fastapi import APIRouter, Depends, Query, Request, status
from typing import Optional
import logging

from string_analyzer import crud, schemas
from string_analyzer.exceptions import MissingQuery
from string_analyzer.store import StringStore, get_store
from string_analyzer.utils import parse_natural_language_query

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=schemas.StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(
    string_data: schemas.StringCreate,
    store: StringStore = Depends(get_store)
):
    """
    Analyze and store a string.
    Returns 400 if "value" is missing, 422 if it is not a string,
    409 if the string already exists.
    """
    value = crud.validate_string_value(string_data)
    return crud.create_string_analysis(store, value)


@router.get("/strings", response_model=schemas.StringListResponse)
def get_all_strings(
    request: Request,
    is_palindrome: Optional[str] = Query(None, description="true or false"),
    min_length: Optional[str] = Query(None, description="Minimum length (inclusive)"),
    max_length: Optional[str] = Query(None, description="Maximum length (inclusive)"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character the string must contain"),
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    Returns 400 if a numeric filter is not an integer.
    """
    filters = crud.parse_list_filters({
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    })
    strings = crud.get_all_strings(store, **filters)

    return schemas.StringListResponse(
        data=strings,
        count=len(strings),
        filters_applied=dict(request.query_params)
    )


# Must be registered before /strings/{string_value:path}
@router.get("/strings/filter-by-natural-language", response_model=schemas.NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise MissingQuery()

    filters = parse_natural_language_query(query)
    strings = crud.filter_by_parsed_query(store, filters)

    return schemas.NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=schemas.InterpretedQuery(
            original=query,
            parsed_filters=filters
        )
    )


@router.get("/strings/{string_value:path}", response_model=schemas.StringResponse)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return crud.get_string_by_value(store, string_value)


@router.delete("/strings/{string_value:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    crud.delete_string(store, string_value)
    return None
