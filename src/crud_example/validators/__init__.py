from .model_validators import (
    SUBMIT_CONTEXT,
    is_submitting,
    require_on_submit,
    validate_model,
    find_unknown_fields,
)

__all__ = [
    "SUBMIT_CONTEXT",
    "is_submitting",
    "require_on_submit",
    "validate_model",
    "find_unknown_fields",
]
