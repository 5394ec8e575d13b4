from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ListResponse(BaseModel, Generic[T]):
    """One page of a paginated collection.

    ``next_index`` is None when there are no further pages, and is then left
    out of the serialized form.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )

    start_index: int
    page_size: int
    next_index: int | None = None
    data: T

    @model_serializer(mode="wrap")
    def omit_missing_next_index(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload = handler(self)
        if self.next_index is None:
            payload.pop("nextIndex", None)
            payload.pop("next_index", None)
        return payload


def new_list(start_index: int, page_size: int, next_index: int, data: Any) -> ListResponse:
    """
    Create a list envelope.

    A next_index of zero or below means "no next page": the field is dropped,
    so a caller cannot announce a next page starting at index 0.
    """
    return ListResponse(
        start_index=start_index,
        page_size=page_size,
        next_index=next_index if next_index > 0 else None,
        data=data,
    )
