from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront.services.catalog_filters import to_number


class ProductIn(BaseModel):
    """Body of POST /product"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    category: int
    name: str
    summary: str
    description: str
    cost: float = Field(allow_inf_nan=False)
    currency: str
    images: List[str] = Field(default_factory=list)

    @field_validator('images', mode='before')
    @classmethod
    def _wrap_single_image(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def to_record(self, product_id: str) -> Dict[str, Any]:
        """转换为存储记录 (soldCount starts at zero, no related products)"""
        return {
            'id': product_id,
            'category': self.category,
            'name': self.name,
            'summary': self.summary,
            'description': self.description,
            'cost': to_number(self.cost),
            'currency': self.currency,
            'soldCount': 0,
            'images': list(self.images),
        }


class ProductRemoval(BaseModel):
    """Body of POST /removeproduct"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str


class ProductQuery(BaseModel):
    """Query string of GET /products: ?cat=<id>&min=<price>&max=<price>"""

    category: int = Field(alias='cat')
    min_price: Optional[float] = Field(default=None, alias='min', allow_inf_nan=False)
    max_price: Optional[float] = Field(default=None, alias='max', allow_inf_nan=False)
