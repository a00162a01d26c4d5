from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    """Product category (reference data, loaded by tools/import_categories.py)"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: int
    name: str
