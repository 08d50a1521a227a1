from typing import ClassVar, List, Optional
from pydantic import BaseModel as RawBaseModel


class BaseModel(RawBaseModel):
    """Document schema; its fields bound ``ModelQuery`` clauses and ``_source``."""

    __index__: ClassVar[Optional[str]] = None

    @classmethod
    def default_fields(cls) -> List[str]:
        return list(cls.model_fields.keys())
