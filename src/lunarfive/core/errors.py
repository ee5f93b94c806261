from __future__ import annotations

from typing import Optional


class LunarFiveError(Exception):
    """Base error."""


class UnknownElementError(LunarFiveError, KeyError):
    """Raised when an element key is not one of 木火土金水."""


class ValidationError(LunarFiveError):
    """User-correctable input problem. `message` is shown verbatim."""

    code = "ValidationError"
    default_message = "輸入資料有誤。"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(ValidationError):
    code = "MissingField"
    default_message = "請完整輸入年、月、日與性別。"


class InvalidFormat(ValidationError):
    code = "InvalidFormat"
    default_message = "年月日需為數字。"


class OutOfRange(ValidationError):
    code = "OutOfRange"
    default_message = "日期數值超出範圍。"


class InvalidEra(ValidationError):
    code = "InvalidEra"
    default_message = "換算後年份無效。"


class InvalidCalendarDate(ValidationError):
    code = "InvalidCalendarDate"
    default_message = "輸入的日期不存在，請重新確認。"


class FutureDate(ValidationError):
    code = "FutureDate"
    default_message = "生日不能是未來日期。"


class EraOutOfSupportedRange(ValidationError):
    code = "EraOutOfSupportedRange"
    default_message = "目前版本僅支援民國元年（西元 1912）之後出生者。"


class InvalidGenderParam(ValidationError):
    code = "InvalidGenderParam"
    default_message = "網址中的性別參數無效，請重新選擇。"


class IncompleteQuery(ValidationError):
    code = "IncompleteQuery"
    default_message = "網址參數不完整，請重新輸入生日與性別後產生結果。"
