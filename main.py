import uvicorn

from wedsite.config import settings
from wedsite.main import app  # noqa: F401

if __name__ == "__main__":
    uvicorn.run("wedsite.main:app", host=settings.host, port=settings.port, reload=settings.debug)
