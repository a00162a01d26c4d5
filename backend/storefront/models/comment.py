from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class CommentIn(BaseModel):
    """Body of POST /comments"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    product_id: str
    user: str
    description: str
    date_time: str = Field(alias='dateTime')
    score: float = Field(allow_inf_nan=False)

    def to_record(self) -> Dict[str, Any]:
        return {
            'product_id': self.product_id,
            'user': self.user,
            'description': self.description,
            'dateTime': self.date_time,
            'score': self.score,
        }


class CommentRemoval(BaseModel):
    """Body of POST /removecomment; ``_id`` is the store id handed out on add"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    record_id: str = Field(alias='_id')
