from __future__ import annotations

from typing import Type, TypeVar

from flask import request
from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def parse_body(schema: Type[M]) -> M:
    """Validate the JSON body of the current request against ``schema``.

    A missing or malformed body validates as ``None`` and therefore fails
    with the schema's own error instead of a bare 400 from Flask.
    """
    return schema.model_validate(request.get_json(silent=True))
