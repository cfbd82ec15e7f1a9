"""mc-messaging CLI entrypoint."""

from __future__ import annotations

from mcmessaging.cli import app

if __name__ == "__main__":
    app()
