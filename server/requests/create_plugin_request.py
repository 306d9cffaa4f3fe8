"""CreatePluginRequest model."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field, ValidationError

from core import PluginCreate


class CreatePluginRequest(BaseModel):
    """Form body for POST /plugins. Fields must be present; empty strings are accepted."""

    description: str = Field(..., description="Free-form plugin description")
    wasm_url: str = Field(..., description="Location of the plugin's WASM module")

    def to_create(self) -> PluginCreate:
        return PluginCreate(description=self.description, wasm_url=self.wasm_url)


async def parse_create_plugin_form(request: Request) -> CreatePluginRequest:
    """
    Read a form-encoded CreatePluginRequest.

    FastAPI's Form() parameters treat "" as a missing value, so the form is
    validated here to keep empty strings distinct from absent fields.

    Raises:
        RequestValidationError: If a field is missing or not a string
    """
    form = await request.form()
    data = {name: form[name] for name in CreatePluginRequest.model_fields if name in form}
    try:
        return CreatePluginRequest.model_validate(data)
    except ValidationError as e:
        errors = [{**error, "loc": ("body", *error["loc"])} for error in e.errors()]
        raise RequestValidationError(errors) from e
