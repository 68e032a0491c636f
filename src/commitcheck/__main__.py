from __future__ import annotations

from commitcheck.main import cli

if __name__ == "__main__":
    cli()
