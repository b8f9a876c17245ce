# render/transport.py
"""
Transporte das imagens: base64 puro ou data URL ("data:image/...;base64,").
O valor bruto é classificado uma única vez em LayerInput e consumido
de forma uniforme depois disso.
"""
import base64
import binascii
from dataclasses import dataclass
from typing import Any, Union

from panocomposite_backend.config import DATA_URL_MARKER, PNG_DATA_URL_PREFIX
from panocomposite_backend.errors import InvalidLayerType, TransportDecodeError


@dataclass(frozen=True)
class RawBase64:
    payload: str


@dataclass(frozen=True)
class DataUrl:
    value: str


LayerInput = Union[RawBase64, DataUrl]


def parse_layer_value(value: Any, label: str = "layer", index: int | None = None) -> LayerInput:
    if not isinstance(value, str):
        raise InvalidLayerType(label, value, index)
    if value.startswith(DATA_URL_MARKER):
        return DataUrl(value)
    return RawBase64(value)


def layer_payload(layer: LayerInput, label: str, index: int | None = None) -> str:
    if isinstance(layer, RawBase64):
        return layer.payload

    # payload = trecho entre a primeira e a segunda vírgula
    parts = layer.value.split(",")
    if len(parts) < 2:
        raise TransportDecodeError(
            label, "data URL inválida (sem separador ',')", index)
    return parts[1]


def layer_payload_bytes(layer: LayerInput, label: str, index: int | None = None) -> bytes:
    payload = layer_payload(layer, label, index)
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TransportDecodeError(label, f"base64 inválido: {e}", index) from e


def unwrap_image_field(value: Any, label: str, index: int | None = None) -> bytes:
    """Valor textual (base64 ou data URL) -> bytes da imagem codificada."""
    return layer_payload_bytes(parse_layer_value(value, label, index), label, index)


def to_data_url(png_bytes: bytes) -> str:
    return PNG_DATA_URL_PREFIX + base64.b64encode(png_bytes).decode("ascii")
