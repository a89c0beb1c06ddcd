from datetime import datetime

from pydantic import BaseModel, Field, field_validator

AMOUNT_PATTERN = r"^[0-9]+\.[0-9]{2}$"
DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
TIME_PATTERN = r"^[0-9]{2}:[0-9]{2}$"

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


# --- Receipts ---

class ItemIn(BaseModel):
    short_description: str = Field(alias="shortDescription")
    price: str = Field(pattern=AMOUNT_PATTERN)

    model_config = {"populate_by_name": True}


class ReceiptIn(BaseModel):
    retailer: str = Field(min_length=1)
    purchase_date: str = Field(alias="purchaseDate", pattern=DATE_PATTERN)
    purchase_time: str = Field(alias="purchaseTime", pattern=TIME_PATTERN)
    items: list[ItemIn] = Field(min_length=1)
    total: str = Field(pattern=AMOUNT_PATTERN)

    model_config = {"populate_by_name": True}

    @field_validator("purchase_date")
    @classmethod
    def check_calendar_date(cls, value: str) -> str:
        try:
            datetime.strptime(value, DATE_FORMAT)
        except ValueError:
            raise ValueError(f"not a calendar date: {value}")
        return value

    @field_validator("purchase_time")
    @classmethod
    def check_time_of_day(cls, value: str) -> str:
        try:
            datetime.strptime(value, TIME_FORMAT)
        except ValueError:
            raise ValueError(f"not a 24-hour HH:MM time: {value}")
        return value
