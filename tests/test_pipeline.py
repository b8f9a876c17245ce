from panocomposite_backend.render import codec
from panocomposite_backend.render.grid import PixelGrid
from panocomposite_backend.render.pipeline import composite_layers, composite_preview

from conftest import pixel_list

RED = (255, 0, 0, 255)


def solid(width, height, pixel):
    return PixelGrid(width, height, [pixel] * (width * height))


def test_no_layers_returns_base_unchanged():
    base = PixelGrid(2, 1, [RED, (1, 2, 3, 4)])
    result = composite_layers(base, [])

    assert result is base
    assert pixel_list(result) == [RED, (1, 2, 3, 4)]


def test_layers_are_applied_in_order_onto_accumulated_result():
    base = solid(1, 1, (255, 255, 255, 255))
    half_red = solid(1, 1, (255, 0, 0, 128))
    half_blue = solid(1, 1, (0, 0, 255, 128))

    red_then_blue = composite_layers(solid(1, 1, (255, 255, 255, 255)), [half_red, half_blue])
    blue_then_red = composite_layers(base, [half_blue, half_red])

    assert pixel_list(red_then_blue) != pixel_list(blue_then_red)
    # azul por cima: mais azul que vermelho
    r, _, b, _ = pixel_list(red_then_blue)[0]
    assert b > r


def test_layers_accept_a_generator():
    overlays = (solid(1, 1, (0, 0, 255, 255)) for _ in range(3))
    assert pixel_list(composite_layers(solid(1, 1, RED), overlays)) == [(0, 0, 255, 255)]


def _spy_resample(monkeypatch):
    calls = []
    real = codec.resample

    def spy(grid, width, height):
        calls.append((grid.size, (width, height)))
        return real(grid, width, height)

    monkeypatch.setattr(codec, "resample", spy)
    return calls


def test_preview_skips_base_with_target_size(monkeypatch):
    calls = _spy_resample(monkeypatch)
    base = solid(4, 2, RED)
    overlay = solid(2, 1, (0, 0, 255, 255))

    result = composite_preview(base, overlay, 4, 2)

    assert calls == [((2, 1), (4, 2))]
    assert result is base
    assert result.size == (4, 2)
    assert pixel_list(result) == [(0, 0, 255, 255)] * 8


def test_preview_resizes_both_when_needed(monkeypatch):
    calls = _spy_resample(monkeypatch)

    result = composite_preview(solid(4, 2, RED), solid(1, 1, (0, 0, 0, 0)), 2, 2)

    assert calls == [((4, 2), (2, 2)), ((1, 1), (2, 2))]
    assert result.size == (2, 2)
    assert pixel_list(result) == [RED] * 4


def test_preview_without_resampling(monkeypatch):
    calls = _spy_resample(monkeypatch)

    result = composite_preview(solid(2, 2, RED), solid(2, 2, (0, 0, 255, 255)), 2, 2)

    assert calls == []
    assert pixel_list(result) == [(0, 0, 255, 255)] * 4
