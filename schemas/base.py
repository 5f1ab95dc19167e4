from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base for internal shapes: Python attributes are snake_case, aliases are the
    camelCase names the application sees. Self-encodable through ``to_wire()``.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
