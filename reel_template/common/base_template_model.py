from pydantic import BaseModel, ConfigDict


class BaseTemplateModel(BaseModel):
    """Base Pydantic model for every reel template type.

    Instances are immutable once built, so a template can be shared across
    concurrent runs and applied any number of times.
    """

    model_config = ConfigDict(
        frozen=True,
        revalidate_instances="always",
        validate_assignment=True,
        populate_by_name=True,
    )
