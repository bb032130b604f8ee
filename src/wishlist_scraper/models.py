from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class WireModel(BaseModel):
    """
    Base for everything decoded from the site's JSON.

    A `null` value counts as an absent key, so the field falls back to its
    default. Fields without a default stay required.
    """

    @model_validator(mode="before")
    @classmethod
    def _null_as_missing(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Item(WireModel):
    """
    A wishlist or collection entry.

    `added` is kept as the site's date string. `item_type` is usually
    "album" or "track" (maybe "merch"); it is not interpreted.
    """
    added: str = ""
    item_url: str = ""
    item_type: str = ""


class BlobTrack(WireModel):
    band_name: str = ""
    title: str = ""
    album_id: Optional[int] = None


class ItemCache(WireModel):
    """Maps of item id -> item. Sequences hold the ids."""
    collection: Dict[str, Item] = Field(default_factory=dict)
    wishlist: Dict[str, Item] = Field(default_factory=dict)

    @field_validator("collection", "wishlist", mode="before")
    @classmethod
    def _null_items_as_empty(cls, v):
        if isinstance(v, dict):
            return {k: {} if item is None else item for k, item in v.items()}
        return v


class ItemPage(WireModel):
    """
    Order and pagination state for one item category.

    - last_token: cursor for the next API call ("" = nothing known yet)
    - sequence: ids already rendered on the page, in render order
    - pending_sequence: first batch not baked into the page yet

    On the wishlist page `sequence` is filled and `pending_sequence` is
    empty; collection data is the other way round. That is observed, not
    checked.
    """
    last_token: str = ""
    sequence: List[str] = Field(default_factory=list)
    pending_sequence: List[str] = Field(default_factory=list)


class FanData(WireModel):
    fan_id: int


class PageBlob(WireModel):
    """JSON document baked into the wishlist page's `data-blob` attribute."""
    track_list: List[BlobTrack] = Field(default_factory=list)
    item_cache: ItemCache = Field(default_factory=ItemCache)
    collection_data: ItemPage = Field(default_factory=ItemPage)
    wishlist_data: ItemPage = Field(default_factory=ItemPage)
    fan_data: FanData

    @property
    def fan_id(self) -> int:
        return self.fan_data.fan_id


class PaginatedItemsResponse(WireModel):
    """Body returned by the wishlist_items API."""
    model_config = ConfigDict(populate_by_name=True)

    items: List[Item] = Field(default_factory=list, alias="track_list")
    more_available: bool = False
    last_token: str = ""
