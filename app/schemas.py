from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List

# Wire format is camelCase; missing or null fields decode to their zero value
class Item(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: str = Field(default="", alias="shortDescription")
    price: str = ""

    @field_validator("short_description", "price", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

class Receipt(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: str = ""
    purchase_date: str = Field(default="", alias="purchaseDate")
    purchase_time: str = Field(default="", alias="purchaseTime")
    items: List[Item] = Field(default_factory=list)
    total: str = ""

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [{} if item is None else item for item in v]
        return v

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
