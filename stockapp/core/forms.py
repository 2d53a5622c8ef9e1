# stockapp/core/forms.py

from fastapi import HTTPException, status
from pydantic import BaseModel, ValidationError


def validate_form(schema: type[BaseModel], **fields):
    """Validate raw form strings against a schema, answering 400 on failure."""
    # Blank inputs count as missing; everything else is passed through as submitted
    data = {
        key: value
        for key, value in fields.items()
        if value is not None and not (isinstance(value, str) and not value.strip())
    }

    try:
        return schema.model_validate(data)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid input",
        )
