from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional, TypeVar

ModelT = TypeVar("ModelT", bound="BaseCaddieModel")


class BaseCaddieModel(BaseModel):
    """Assignment-validated model with field names and aliases both accepted."""
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Set one field from user input.

        Returns "<field>: <reason>" when rejected; the model keeps its old value.
        """
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return f"{field_name}: {e.errors()[0]['msg']}"

    def validated_copy(self: ModelT, **updates: Any) -> ModelT:
        """Copy with `updates` applied, re-running validation (model_copy does not)."""
        return type(self).model_validate({**self.model_dump(), **updates})
