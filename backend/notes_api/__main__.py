import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "notes_api.main:app",
        host=os.getenv("NOTES_API_HOST", "127.0.0.1"),
        port=int(os.getenv("NOTES_API_PORT", "8080")),
        log_level=os.getenv("LOG_LEVEL", "INFO").lower(),
    )


if __name__ == "__main__":
    main()
