from pydantic import BaseModel
from typing import List, Any


class CompositeRequest(BaseModel):
    base: str
    overlay: str


class LayersCompositeRequest(BaseModel):
    base: str
    # Any: valores não textuais chegam ao núcleo e viram InvalidLayerType
    layers: List[Any]


class PreviewRequest(BaseModel):
    base: str
    overlay: str
    width: int
    height: int


class CompositeResponse(BaseModel):
    status: str
    image: str
