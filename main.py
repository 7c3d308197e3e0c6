"""
Main entry point for the Lydia to YNAB converter.

This module loads configuration and starts the FastAPI server.
"""
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).parent

# Load environment variables before settings are first read
_env_file = PROJECT_ROOT / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

from core.config import get_settings  # noqa: E402
from core.exceptions import ConfigurationError  # noqa: E402
from core.logger import setup_logger  # noqa: E402

logger = setup_logger(__name__)


def main():
    """Main application entry point."""
    try:
        try:
            settings = get_settings()
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration", details={"errors": e.errors()})
        
        import uvicorn
        from app.api import app
        
        logger.info(f"Starting {settings.app_name}")
        logger.info(f"Log Level: {settings.log_level}")
        logger.info(f"Output file: {settings.output_filename}")
        logger.info(f"Strict rows: {settings.strict_rows}")
        logger.info(f"Starting server on {settings.host}:{settings.port}")
        
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower()
        )
    
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        if e.details:
            logger.error(f"Details: {e.details}")
        sys.exit(1)
    
    except Exception as e:
        logger.error(f"Failed to start application: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
