from pydantic import BaseModel, ConfigDict, Field
from typing import Any


class GraphQLRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(None, alias='operationName')
