# render/blend.py
"""
Operador source-over para pixels RGBA8 com alpha não pré-multiplicado.

    a_o = O.a / 255, a_b = B.a / 255
    a_r = a_o + a_b * (1 - a_o)
    c   = (O.c * a_o + B.c * a_b * (1 - a_o)) / a_r
    a   = a_r * 255

Os valores são truncados (não arredondados). A conta é feita na forma
racional inteira equivalente (tudo multiplicado por 255²), em uint32, então
o truncamento é exato e as identidades de overlay opaco/transparente valem
sem erro de ponto flutuante.
"""
import numpy as np

from panocomposite_backend.render.grid import Pixel


def blend_arrays(base: np.ndarray, overlay: np.ndarray) -> np.ndarray:
    """
    Mescla duas regiões uint8 (..., 4) de mesmo shape e devolve uma nova
    região uint8. Onde a_r == 0 o resultado é preto transparente.
    """
    base = base.astype(np.uint32)
    overlay = overlay.astype(np.uint32)

    overlay_alpha = overlay[..., 3:4]
    # a_r * 255² = a_o*255² + a_b*255*(255 - a_o*255)
    base_weight = base[..., 3:4] * (255 - overlay_alpha)
    overlay_weight = overlay_alpha * 255
    result_alpha = overlay_weight + base_weight

    empty = result_alpha == 0
    divisor = np.where(empty, 1, result_alpha)
    color = (overlay[..., :3] * overlay_weight + base[..., :3] * base_weight) // divisor

    result = np.empty(base.shape, dtype=np.uint8)
    result[..., :3] = np.minimum(color, 255)
    result[..., 3:4] = np.minimum(result_alpha // 255, 255)
    result[empty[..., 0]] = 0
    return result


def blend_pixels(base: Pixel, overlay: Pixel) -> Pixel:
    blended = blend_arrays(
        np.array(base, dtype=np.uint8), np.array(overlay, dtype=np.uint8))
    return tuple(int(channel) for channel in blended)
