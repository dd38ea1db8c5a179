"""`python -m smartnotes`: levanta uvicorn en el puerto configurado."""
import uvicorn

from smartnotes.core.config import Settings
from smartnotes.main import create_app


def run() -> None:
    settings = Settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
