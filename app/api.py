"""
FastAPI routes for statement upload and conversion.
Thin HTTP layer over ConversionService.
"""
from pathlib import Path
from typing import List

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from core.config import get_settings
from core.exceptions import ConverterException
from core.logger import setup_logger
from core.schema import RawFile
from services.conversion_service import ConversionService

logger = setup_logger(__name__)
settings = get_settings()

# Initialize FastAPI app
app = FastAPI(
    title="Lydia to YNAB Converter",
    description="Convert Lydia statement exports into a YNAB import CSV",
    version="1.0.0"
)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render upload form."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": settings.app_name, "output_filename": settings.output_filename}
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "lydia_ynab",
        "version": "1.0.0"
    }


@app.get("/favicon.ico")
async def favicon():
    """Return empty response for favicon to avoid 404 errors."""
    return Response(status_code=204)


@app.post("/convert")
async def convert_files(files: List[UploadFile] = File(...)):
    """
    Convert uploaded Lydia exports into a single YNAB CSV download.
    
    Args:
        files: Statement files, merged in upload order
    
    Returns:
        CSV attachment
    """
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")
    if len(files) > settings.max_upload_files:
        raise HTTPException(
            status_code=400,
            detail=f"Too many files: {len(files)}. At most {settings.max_upload_files} are accepted."
        )
    
    logger.info(f"Received {len(files)} file(s): {[f.filename for f in files]}")
    
    raw_files = [
        RawFile(name=upload.filename or f"file_{idx + 1}", content=await upload.read())
        for idx, upload in enumerate(files)
    ]
    
    try:
        content = await ConversionService().convert_to_csv(raw_files)
    except ConverterException as e:
        logger.error(f"Conversion failed: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Conversion failed with unexpected error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Conversion failed: {str(e)}")
    
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{settings.output_filename}"'}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
