"""Run the development server: ``python -m propdesk``."""

import os

import uvicorn


def main():
    port = int(os.getenv("PORT", 8000))
    uvicorn.run("propdesk.main:app", host="0.0.0.0", port=port, reload=True)


if __name__ == "__main__":
    main()
