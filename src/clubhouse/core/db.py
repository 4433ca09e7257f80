from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Self

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pymongo.asynchronous.cursor import AsyncCursor
from pymongo.errors import PyMongoError

from clubhouse.errors import StoreUnavailableError


class MongoModel(BaseModel):
    id: ObjectId = Field(alias="_id", serialization_alias="id", default_factory=ObjectId)

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    def to_mongo(self) -> dict[str, Any]:
        """Convert the model to a dictionary for MongoDB storage with _id field."""
        data = self.model_dump()
        if "id" in data:
            data["_id"] = data.pop("id")  # Rename id → _id for MongoDB
        return data

    @classmethod
    async def list_cursor(cls, cursor: AsyncCursor[dict[str, Any]]) -> list[Self]:
        """Iterate over an AsyncCursor and return a list of model instances."""
        return [cls.model_validate(item) async for item in cursor]


@contextmanager
def store_call(operation: str) -> Iterator[None]:
    """Turn driver failures on a critical path into StoreUnavailableError."""
    try:
        yield
    except PyMongoError as e:
        raise StoreUnavailableError(operation) from e
