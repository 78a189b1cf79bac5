"""Module entrypoint.

Allows:
    python -m soroban_error_triage
"""

from __future__ import annotations

from soroban_error_triage.cli import main

if __name__ == "__main__":
    main()
