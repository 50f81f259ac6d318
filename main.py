from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pathlib import Path
from typing import Optional
import logging
import traceback

from background_remover import BackgroundRemover
from mailer import Mailer
from qr_code import make_qr_data_url
from settings import Settings
from whatsapp_client import WhatsAppClient

# Poster module imports
from poster import AssetStore, PosterComposer, PosterStore, SelfieBooth, get_theme_options
from poster.api_models import ErrorResponse, ThemeOptionsResponse, UploadResponse

settings = Settings()

# Logging setup
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI Selfie Booth", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Finished posters are served from here
Path(settings.public_dir).mkdir(parents=True, exist_ok=True)
app.mount("/public", StaticFiles(directory=settings.public_dir, check_dir=False), name="public")

# Initialize services
booth = SelfieBooth(
    remover=BackgroundRemover(settings),
    composer=PosterComposer(AssetStore(settings.assets_dir)),
    store=PosterStore(settings.public_dir, prefix=settings.output_prefix),
)
mailer = Mailer(settings)
whatsapp = WhatsAppClient(settings)


def get_booth() -> SelfieBooth:
    return booth


def get_mailer() -> Mailer:
    return mailer


def get_whatsapp() -> WhatsAppClient:
    return whatsapp


def error_response(status_code: int, error: str, error_type: Optional[str] = None, details: Optional[dict] = None) -> JSONResponse:
    body = ErrorResponse(error=error, error_type=error_type, details=details or {})
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "selfie-booth"}


@app.get("/")
async def root():
    return {
        "service": "AI Selfie Booth",
        "version": app.version,
        "description": "Background removal + themed poster compositing",
        "endpoints": ["/api/upload", "/api/themes", "/public/{file}", "/health"],
    }


@app.get("/api/themes", response_model=ThemeOptionsResponse)
async def list_themes():
    """Get available poster themes and their background templates."""
    return ThemeOptionsResponse(themes=get_theme_options(), default=settings.default_theme)


@app.post(
    "/api/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse},
               500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def upload_selfie(
    request: Request,
    selfie: Optional[UploadFile] = File(None),
    theme: str = Form(settings.default_theme),
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    booth: SelfieBooth = Depends(get_booth),
    mailer: Mailer = Depends(get_mailer),
    whatsapp: WhatsAppClient = Depends(get_whatsapp),
):
    """
    Turn an uploaded selfie into a themed poster.

    Workflow:
    1. Remove background + composite + save (SelfieBooth)
    2. Build public URL and QR code
    3. Optionally email / WhatsApp the link

    Steps 2-3 degrade gracefully: a failed QR code or send never fails the
    request once the poster exists.
    """
    if selfie is None or not selfie.filename:
        return error_response(400, "No file uploaded")

    try:
        logger.info(f"Uploaded file: {selfie.filename}")
        logger.info(f"Theme: {theme}")
        logger.info(f"Email: {email or '(not provided)'}")

        content = await selfie.read()
        result = await booth.process(content, theme, filename=selfie.filename)

        if not result.success:
            error = result.error
            return error_response(error.code, error.message, error.error_type, error.details)

        public_url = str(request.url_for("public", path=result.file_name))

        # QR code for download
        qr_data_url = None
        try:
            qr_data_url = make_qr_data_url(public_url)
        except Exception as e:
            logger.error(f"QR code generation failed: {e}")

        email_sent = False
        if email:
            email_sent = await run_in_threadpool(
                mailer.send_result_email, email, name, theme, public_url, qr_data_url
            )
        else:
            logger.warning("No email provided - skipping email send")

        whatsapp_sent = False
        if phone:
            whatsapp_sent = await whatsapp.send_image(phone, public_url)

        return UploadResponse(
            theme=theme,
            image_url=public_url,
            file_name=result.file_name,
            qr_data_url=qr_data_url,
            email_sent=email_sent,
            whatsapp_sent=whatsapp_sent,
        )

    except Exception as e:
        tb = traceback.format_exc()
        logger.error(f"/api/upload route failed: {e}")
        logger.error(f"Traceback:\n{tb}")
        return error_response(500, str(e) or "Failed to process selfie")

    finally:
        await selfie.close()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
