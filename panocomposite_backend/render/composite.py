# render/composite.py
"""
Pontos de entrada da composição. Cada chamada é única e sem estado:
bytes codificados entram, uma data URL PNG sai. Qualquer erro aborta a
chamada inteira, sem resultado parcial.
"""
import logging
import time
from typing import Any, Iterable, Iterator

from panocomposite_backend import config
from panocomposite_backend.errors import InvalidPreviewSize
from panocomposite_backend.render import codec
from panocomposite_backend.render.compositor import composite_layer
from panocomposite_backend.render.grid import PixelGrid
from panocomposite_backend.render.pipeline import composite_layers, composite_preview
from panocomposite_backend.render.transport import to_data_url, unwrap_image_field

_diagnostics_installed = False


def install_diagnostics() -> None:
    """Configura o logging do processo uma única vez (idempotente)."""
    global _diagnostics_installed
    if _diagnostics_installed:
        return
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    _diagnostics_installed = True


def _finish(grid: PixelGrid) -> str:
    return to_data_url(codec.encode_png(grid))


def composite_images(base_image_data: bytes, overlay_image_data: bytes) -> str:
    base = codec.decode_image(base_image_data, "base")
    overlay = codec.decode_image(overlay_image_data, "overlay")

    result = composite_layer(base, overlay)
    logging.info(
        f"✅ Composição simples: base {base.width}x{base.height}, "
        f"overlay {overlay.width}x{overlay.height}")
    return _finish(result)


def _decode_layers(layers_data: Iterable[Any]) -> Iterator[PixelGrid]:
    for index, layer_value in enumerate(layers_data):
        overlay_bytes = unwrap_image_field(layer_value, "layer", index)
        yield codec.decode_image(overlay_bytes, "layer", index)


def composite_multiple_layers(base_image_data: bytes, layers_data: Iterable[Any]) -> str:
    """
    Empilha as camadas na ordem dada. Cada camada é base64 puro ou data URL;
    uma camada inválida aborta tudo e o erro informa o índice dela.
    """
    start = time.monotonic()
    base = codec.decode_image(base_image_data, "base")

    layers = list(layers_data)
    result = composite_layers(base, _decode_layers(layers))

    elapsed = time.monotonic() - start
    logging.info(
        f"✅ Stack de {len(layers)} camadas gerado em {elapsed:.2f}s "
        f"({result.width}x{result.height})")
    return _finish(result)


def validate_preview_size(width: Any, height: Any) -> None:
    for value in (width, height):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidPreviewSize(width, height, "dimensões precisam ser inteiras")
        if value <= 0:
            raise InvalidPreviewSize(width, height, "dimensões precisam ser positivas")
        if value > config.MAX_PREVIEW_SIZE:
            raise InvalidPreviewSize(
                width, height, f"limite é {config.MAX_PREVIEW_SIZE} por lado")


def generate_preview(
    base_image_data: bytes,
    overlay_image_data: bytes,
    width: int,
    height: int,
) -> str:
    validate_preview_size(width, height)

    base = codec.decode_image(base_image_data, "base")
    overlay = codec.decode_image(overlay_image_data, "overlay")

    result = composite_preview(base, overlay, width, height)
    logging.info(f"✅ Preview {width}x{height} gerado")
    return _finish(result)
