from typing import Any

from databases import Database
from pydantic import BaseModel
from sqlalchemy.sql.selectable import ExecutableReturnsRows


def _record_to_dict(record: Any, query: ExecutableReturnsRows) -> dict[str, Any]:
    # Index by returned column key so every backend applies its result processors.
    return {column.key: record[column.key] for column in query.exported_columns}


async def fetch_one_parsed[BaseModelT: BaseModel](
    database: Database, model: type[BaseModelT], query: ExecutableReturnsRows
) -> BaseModelT | None:
    record = await database.fetch_one(query)
    return model.model_validate(_record_to_dict(record, query)) if record is not None else None


async def fetch_all_parsed[BaseModelT: BaseModel](
    database: Database, model: type[BaseModelT], query: ExecutableReturnsRows
) -> list[BaseModelT]:
    records = await database.fetch_all(query)
    return [model.model_validate(_record_to_dict(record, query)) for record in records]
