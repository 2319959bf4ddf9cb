"""Base model shared by every wire record"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable record exchanged with the DrawIt backend

    Attributes use snake_case in Python and camelCase on the wire
    (e.g. ``device_id`` <-> ``deviceId``). Both spellings are accepted on
    input. Instances are frozen; use ``model_copy(update=...)`` or the
    ``with_*`` helpers to derive a changed copy.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    def to_wire(self) -> Dict[str, Any]:
        """Dump to a JSON-ready dict keyed by wire names

        Unset optional fields (None) are omitted rather than sent as null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
