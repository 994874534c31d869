# /attenote/__main__.py

import os

import uvicorn


def main():
    """Serves the API with uvicorn; `python -m attenote` or the `attenote-backend` script."""
    uvicorn.run(
        "attenote.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8000)),
        reload=False,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
