"""Request body dependency that always runs the full rule set."""

import json
from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def json_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """
    Build a dependency that validates the request body against ``model``.

    A missing, unparsable, or non-object body is validated as ``{}`` so the
    client sees every rule message instead of a single "body required" error.
    """

    async def dependency(request: Request) -> ModelT:
        raw = await request.body()
        try:
            payload = json.loads(raw) if raw else {}
        except ValueError:
            payload = {}

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            errors = [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
            raise RequestValidationError(errors, body=payload) from None

    return dependency
