# render/pipeline.py
import logging
from functools import reduce
from typing import Iterable

from panocomposite_backend.render import codec
from panocomposite_backend.render.compositor import composite_layer
from panocomposite_backend.render.grid import PixelGrid


def composite_layers(base: PixelGrid, overlays: Iterable[PixelGrid]) -> PixelGrid:
    """
    Empilha os overlays na ordem recebida, cada um sobre o resultado
    acumulado dos anteriores. Sem overlays, devolve a base intacta.
    """
    return reduce(composite_layer, overlays, base)


def fit_to(grid: PixelGrid, width: int, height: int) -> PixelGrid:
    """Reamostra só quando o tamanho atual difere do alvo."""
    if grid.size == (width, height):
        return grid
    logging.debug(
        f"↔️ Reamostrando {grid.width}x{grid.height} -> {width}x{height}")
    return codec.resample(grid, width, height)


def composite_preview(
    base: PixelGrid,
    overlay: PixelGrid,
    width: int,
    height: int,
) -> PixelGrid:
    """
    Redimensiona base e overlay para (width, height) ANTES de mesclar,
    assim as duas grades têm o mesmo tamanho e nada é cortado no blend.
    """
    base = fit_to(base, width, height)
    overlay = fit_to(overlay, width, height)
    return composite_layer(base, overlay)
