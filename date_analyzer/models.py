from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from .labels import DEFAULT_LANGUAGE, message


class DateErrorKind(str, Enum):
    INVALID_YEAR = "InvalidYear"
    INVALID_MONTH = "InvalidMonth"
    INVALID_DAY = "InvalidDay"


class AnalysisResult(BaseModel):
    """
    Tek bir tarih analizinin sonucu (değiştirilemez):
    - day / month / year: girdi olduğu gibi geri yansıtılır
    - valid_date=True ise western_zodiac + chinese_zodiac dolu, error_* boş
    - valid_date=False ise error_message + error_kind dolu, burçlar boş
    JSON çıktısında alanlar camelCase (validDate, leapYear, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    day: int
    month: int
    year: int
    valid_date: bool
    leap_year: bool = False
    western_zodiac: Optional[str] = None
    chinese_zodiac: Optional[str] = None
    error_message: Optional[str] = None
    error_kind: Optional[DateErrorKind] = None
    language: str = DEFAULT_LANGUAGE

    @model_validator(mode="after")
    def _check_variant(self):
        has_signs = self.western_zodiac is not None and self.chinese_zodiac is not None
        has_error = self.error_message is not None or self.error_kind is not None
        if self.valid_date and (not has_signs or has_error):
            raise ValueError("valid result needs both zodiac signs and no error")
        if not self.valid_date and (self.error_message is None or self.error_kind is None):
            raise ValueError("invalid result needs an error message and kind")
        if not self.valid_date and (
            self.western_zodiac is not None or self.chinese_zodiac is not None
        ):
            raise ValueError("invalid result cannot carry zodiac signs")
        return self

    @classmethod
    def success(
        cls,
        day: int,
        month: int,
        year: int,
        leap_year: bool,
        western_zodiac: str,
        chinese_zodiac: str,
        language: str = DEFAULT_LANGUAGE,
    ) -> "AnalysisResult":
        return cls(
            day=day,
            month=month,
            year=year,
            valid_date=True,
            leap_year=leap_year,
            western_zodiac=western_zodiac,
            chinese_zodiac=chinese_zodiac,
            language=language,
        )

    @classmethod
    def error(
        cls,
        day: int,
        month: int,
        year: int,
        kind: DateErrorKind,
        error_message: str,
        language: str = DEFAULT_LANGUAGE,
    ) -> "AnalysisResult":
        return cls(
            day=day,
            month=month,
            year=year,
            valid_date=False,
            error_kind=kind,
            error_message=error_message,
            language=language,
        )

    def describe(self) -> str:
        """Sonucun tek satırlık, sonucun diline göre yazılmış özeti."""
        if not self.valid_date:
            return message(
                "summary_invalid",
                self.language,
                day=self.day,
                month=self.month,
                year=self.year,
                error=self.error_message,
            )
        return message(
            "summary_valid",
            self.language,
            day=self.day,
            month=self.month,
            year=self.year,
            leap=message("yes" if self.leap_year else "no", self.language),
            western=self.western_zodiac,
            chinese=self.chinese_zodiac,
        )

    def __str__(self) -> str:
        return self.describe()
