from typing import Annotated, Optional, Union

from pydantic import BaseModel, Field, StrictStr

# Request schemas. Validation happens here, before the store is touched.

Name = Annotated[StrictStr, Field(min_length=2)]
# finite JSON numbers only; strings, booleans, Infinity and NaN are rejected
PositiveNumber = Union[
    Annotated[int, Field(strict=True, gt=0)],
    Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)],
]

class ProductIn(BaseModel):
    name: Name
    description: StrictStr
    price: PositiveNumber
    stock: PositiveNumber

class ProductUpdate(BaseModel):
    """Partial update; every field is optional and ``null`` means "leave as is"."""
    name: Optional[Name] = None
    description: Optional[StrictStr] = None
    price: Optional[PositiveNumber] = None
    stock: Optional[PositiveNumber] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)

def deleted_message(product_id: int) -> str:
    return f"Product with ID {product_id} has been deleted"
