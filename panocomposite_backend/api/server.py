# api/server.py
import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from panocomposite_backend import config
from panocomposite_backend.errors import CompositeError, EncodeError
from panocomposite_backend.models.composite import (
    CompositeRequest,
    CompositeResponse,
    LayersCompositeRequest,
    PreviewRequest,
)
from panocomposite_backend.render.composite import (
    composite_images,
    composite_multiple_layers,
    generate_preview,
    install_diagnostics,
)
from panocomposite_backend.render.transport import unwrap_image_field

install_diagnostics()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.info(
        f"🚀 Compositor pronto: até {config.MAX_LAYERS} camadas, "
        f"preview máximo {config.MAX_PREVIEW_SIZE}px por lado."
    )
    yield
    logging.info("🧹 Encerrando aplicação.")

app = FastAPI(lifespan=lifespan)


def _run(action: str, render) -> CompositeResponse:
    start = time.monotonic()
    try:
        image = render()
    except HTTPException:
        raise
    except EncodeError as e:
        logging.exception(f"❌ Falha ao codificar resultado ({action}):")
        raise HTTPException(status_code=500, detail=e.message)
    except CompositeError as e:
        logging.warning(f"⚠️ {action} rejeitado: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logging.exception(f"❌ Erro inesperado durante {action}:")
        raise HTTPException(
            status_code=500, detail=f"Erro interno ao processar {action}: {str(e)}")

    elapsed = time.monotonic() - start
    logging.info(f"✅ {action} completo em {elapsed:.2f}s")
    return CompositeResponse(status="ok", image=image)


@app.post("/api/composite", response_model=CompositeResponse)
def composite(payload: CompositeRequest):
    logging.info("🖼️ Requisição de composição recebida")
    return _run("composição", lambda: composite_images(
        unwrap_image_field(payload.base, "base"),
        unwrap_image_field(payload.overlay, "overlay"),
    ))


@app.post("/api/composite/layers", response_model=CompositeResponse)
def composite_layers(payload: LayersCompositeRequest):
    logging.info(
        f"🖼️ Requisição de stack recebida: {len(payload.layers)} camadas")

    if len(payload.layers) > config.MAX_LAYERS:
        raise HTTPException(
            status_code=400,
            detail=f"Muitas camadas: {len(payload.layers)} (máximo {config.MAX_LAYERS})"
        )

    return _run("stack de camadas", lambda: composite_multiple_layers(
        unwrap_image_field(payload.base, "base"),
        payload.layers,
    ))


@app.post("/api/preview", response_model=CompositeResponse)
def preview(payload: PreviewRequest):
    logging.info(
        f"🖼️ Requisição de preview recebida: {payload.width}x{payload.height}")
    return _run("preview", lambda: generate_preview(
        unwrap_image_field(payload.base, "base"),
        unwrap_image_field(payload.overlay, "overlay"),
        payload.width,
        payload.height,
    ))


@app.get("/api/health")
def health():
    return {"status": "ok", "service": "panocomposite-backend", "version": "0.1.0"}
