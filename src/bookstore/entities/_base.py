from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Entity(BaseModel):
    """Base entity class for domain models exposed over the API.

    Fields serialize with camelCase aliases and accept either the alias or
    the Python field name on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
