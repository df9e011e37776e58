"""Request body validation for Flask endpoints.

@validate_request parses the JSON body into the Pydantic model named by the
endpoint's type hints and passes it in as a keyword argument. Path parameters
pass through untouched.
"""

import inspect
import logging
from functools import wraps
from typing import get_type_hints

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Invalid request body"


def _find_model_param(f) -> tuple[str, type[BaseModel]] | None:
    hints = get_type_hints(f)
    for name in inspect.signature(f).parameters:
        hint = hints.get(name)
        if inspect.isclass(hint) and issubclass(hint, BaseModel):
            return name, hint
    return None


def _request_body() -> dict:
    """JSON object body, falling back to form fields, or an empty dict."""
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        return body
    return request.form.to_dict()


def validate_request(f):
    """
    Decorator to validate the request body against a Pydantic model.

    The model may set a `validation_message` class attribute; that message is
    what the client sees when validation fails. Field-level errors are logged,
    not returned.

    Raises:
        ValidationError: If the body does not match the model

    Example:
    ```python
    @auth_bp.post("/login")
    @validate_request
    def login(data: UserLogin):
        ...
    ```
    """
    model_param = _find_model_param(f)
    if model_param is None:
        return f

    param_name, model = model_param
    message = getattr(model, "validation_message", DEFAULT_MESSAGE)

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            kwargs[param_name] = model.model_validate(_request_body())
        except PydanticValidationError as e:
            fields = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
            logger.info(f"Rejected {request.path}: invalid fields {fields}")
            raise ValidationError(message, {"fields": fields})
        return f(*args, **kwargs)

    return wrapper
