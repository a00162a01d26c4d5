from typing import Any, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from storefront.errors import ValidationFailure

ModelT = TypeVar('ModelT', bound=BaseModel)


def validate_payload(model: Type[ModelT], payload: Any) -> Union[ModelT, ValidationFailure]:
    """Coerce ``payload`` into ``model``, or describe why it cannot be."""
    if not isinstance(payload, dict):
        return ValidationFailure('expected a JSON object')
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        fields = ['.'.join(str(part) for part in error['loc']) for error in e.errors()]
        return ValidationFailure('invalid or missing fields', fields=fields)
