from pydantic import BaseModel, ConfigDict


class ValueEntity(BaseModel):
    """Base class for immutable in-memory entities.

    Values are stored verbatim; instances are frozen after construction
    and nested entity instances are kept by reference, never copied.
    """

    model_config = ConfigDict(frozen=True, revalidate_instances="never")
