from typing import Optional, TypedDict

from schemas.base import WireModel
from schemas.collectibles import APICollectibles, Collectibles


class _APIUserBase(TypedDict):
    id: str
    username: str


class APIUser(_APIUserBase, total=False):
    discriminator: str
    global_name: Optional[str]
    avatar: Optional[str]
    bot: bool
    system: bool
    collectibles: Optional[APICollectibles]


class User(WireModel):
    id: str
    username: str
    discriminator: Optional[str]
    global_name: Optional[str]
    avatar: Optional[str]
    bot: bool
    system: bool
    collectibles: Optional[Collectibles]
