from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List
from datetime import datetime

class StringCreate(BaseModel):
    # Typed as Any so a non-string value reaches the 422 check instead of
    # failing request validation.
    value: Any = Field(None, description="String to analyze")

class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]

class StringResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime

class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, str]

class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]

class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery
