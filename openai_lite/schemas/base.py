# Shared pydantic bases for request bodies and API payloads.
from typing import Any, Dict, TypeVar

from pydantic import BaseModel, ConfigDict

_ArgsT = TypeVar("_ArgsT", bound="Arguments")


class Arguments(BaseModel):
    """
    Base for every request body.
    - Assignment is validated, so `args.temperature = "hot"` fails early.
    - Unset optional fields never reach the wire (see `to_payload`).
    """

    model_config = ConfigDict(validate_assignment=True)

    def set(self: _ArgsT, **fields: Any) -> _ArgsT:
        """Chainable setter: `ChatArguments(...).set(temperature=0.2, max_tokens=64)`."""
        for name, value in fields.items():
            if name not in type(self).model_fields:
                raise AttributeError(f"{type(self).__name__} has no field '{name}'")
            setattr(self, name, value)
        return self

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class APIObject(BaseModel):
    # Unknown keys sent by the API are kept, not rejected.
    model_config = ConfigDict(extra="allow")
