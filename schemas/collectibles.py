from typing import Optional, TypedDict

from schemas.base import WireModel


class APINameplate(TypedDict):
    sku_id: str
    asset: str
    label: str
    palette: str


class APICollectibles(TypedDict, total=False):
    nameplate: Optional[APINameplate]


class Nameplate(WireModel):
    sku_id: str
    asset: str
    label: str
    palette: str


class Collectibles(WireModel):
    nameplate: Optional[Nameplate]
