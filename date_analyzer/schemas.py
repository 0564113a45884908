from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .models import AnalysisResult


class AnalyzeRequest(BaseModel):
    day: int
    month: int
    year: int


class AnalysisResponse(BaseModel):
    success: bool
    data: Optional[AnalysisResult] = None
    error: Optional[str] = None


class LeapYearResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    year: int
    leap_year: bool


class WesternSignResponse(BaseModel):
    day: int
    month: int
    sign: str


class ChineseSignResponse(BaseModel):
    year: int
    sign: str
