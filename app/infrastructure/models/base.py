"""Base Pydantic model configurations for infrastructure.

Defines the model configuration shared by envelope and query models.
"""

from pydantic import BaseModel, ConfigDict


class InfrastructureModel(BaseModel):
    """Base model for all infrastructure components.

    Provides standard Pydantic configuration for:
    - populate_by_name, so camelCase wire aliases and snake_case names both work
    - Validation on assignment
    - Whitespace stripping on strings
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )
