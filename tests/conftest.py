"""Configuração do pytest para o projeto gitevents."""

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from tests.fakes.discord_signing import DiscordSigner  # noqa: E402


@pytest.fixture
def signer() -> DiscordSigner:
    """Par de chaves Ed25519 novo por teste."""
    return DiscordSigner(Ed25519PrivateKey.generate())
