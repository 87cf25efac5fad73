"""Base models shared by all FACEIT Data API response shapes.

The upstream API omits absent fields instead of sending ``null``, so optional
fields default to ``None`` while the identifying fields of each entity stay
mandatory.
"""

from pydantic import BaseModel, ConfigDict


class FaceitModel(BaseModel):
    """Base class for all data-transfer models.

    Fields are addressed by their Python name or by their JSON alias.
    """

    model_config = ConfigDict(populate_by_name=True)


class Pagination(FaceitModel):
    """Bounds of a paginated list response."""

    start: int
    end: int
