from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError


class AttributeResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    value: Any = None


class DeviceStatusResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    attributes: List[AttributeResponse] = []

    def find_attribute(self, attribute_id: int) -> Optional[AttributeResponse]:
        return next((a for a in self.attributes if a.id == attribute_id), None)


class AferoErrorResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    error: Optional[str] = None
    error_description: str


class AttributeWriteRequest(BaseModel):
    type: Literal["attribute_write"] = "attribute_write"
    attrId: int
    data: str


def is_afero_error(payload: Any) -> bool:
    try:
        AferoErrorResponse.model_validate(payload)
    except ValidationError:
        return False
    return True
