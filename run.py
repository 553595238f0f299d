import uvicorn
import logging
from app import create_app
from app.core.config import configure_logging, settings

configure_logging(settings.LOG_LEVEL)

app = create_app()

if __name__ == "__main__":
    # Start the FastAPI server
    logging.info(f"Server running on http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
