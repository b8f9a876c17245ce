# render/compositor.py
from panocomposite_backend.render.blend import blend_arrays
from panocomposite_backend.render.grid import PixelGrid

# Faixa de linhas por passo: limita os temporários uint32 em imagens grandes
BAND_ROWS = 256


def composite_layer(base: PixelGrid, overlay: PixelGrid) -> PixelGrid:
    """
    Aplica o overlay sobre a base, alterando a base no lugar.

    Só coordenadas presentes nas duas grades são mescladas: pixels do overlay
    fora da base são ignorados e a região da base não coberta fica intacta.
    Retorna a própria base.
    """
    width = min(base.width, overlay.width)
    height = min(base.height, overlay.height)

    for top in range(0, height, BAND_ROWS):
        bottom = min(top + BAND_ROWS, height)
        base.pixels[top:bottom, :width] = blend_arrays(
            base.pixels[top:bottom, :width],
            overlay.pixels[top:bottom, :width],
        )

    return base
