"""
Pytest config.

The package lives under ``backend/``. When the project is not installed (e.g. running
a global ``pytest`` entrypoint from a fresh checkout), put that directory on sys.path
so ``import legal_workspace`` resolves during collection.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_backend_on_syspath() -> None:
    backend = Path(__file__).resolve().parents[1] / "backend"
    backend_str = str(backend)
    if backend_str not in sys.path:
        sys.path.insert(0, backend_str)


_ensure_backend_on_syspath()


@pytest.fixture
def analysis_payload() -> dict:
    return {
        "legalSections": [
            {"section": "BNS Section 103", "description": "Punishment for murder"},
            {"section": "IPC Section 302", "description": "Punishment for murder (repealed code)"},
        ],
        "punishmentRange": "Death or imprisonment for life, and fine.",
        "presentationStrategy": "Establish intention through prior enmity and eyewitness testimony.",
        "casePrecedents": [
            {"name": "Bachan Singh v. State of Punjab (1980)", "relevance": "Rarest of rare doctrine"},
        ],
        "courtDocument": "IN THE COURT OF SESSIONS\n\nFacts of the Case\n...",
    }
