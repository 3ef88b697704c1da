from typing import Any

from pydantic import ConfigDict

from ..exceptions.api_exception import APIException
from ..schemas.error import ErrorResponse


def example(**kwargs: Any) -> ConfigDict:
    return ConfigDict(json_schema_extra={"example": kwargs})


def responses(default: type, *args: type[APIException]) -> dict[int | str, dict[str, Any]]:
    """Build the OpenAPI `responses` dict for an endpoint from its success model and the errors it may raise."""

    exceptions: dict[int, list[type[APIException]]] = {}
    for exc in args:
        exceptions.setdefault(exc.status_code, []).append(exc)

    return {
        200: {"model": default},
        **{
            code: {
                "model": ErrorResponse,
                "description": " / ".join(exc.description for exc in excs),
                "content": {
                    "application/json": {
                        "examples": {
                            exc.__name__: {"description": exc.description, "value": {"error": exc.detail}}
                            for exc in excs
                        }
                    }
                },
            }
            for code, excs in exceptions.items()
        },
    }
