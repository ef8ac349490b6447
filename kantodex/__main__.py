"""Executable entrypoint for the Pokédex service."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "kantodex.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        workers=1,
    )


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
