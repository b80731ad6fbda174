"""Settings específicas de Discord.

Chave pública para verificar interações recebidas e credenciais do bot
para a chamada administrativa de registro do comando.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DISCORD_API_VERSION: str = "v10"
DISCORD_API_BASE_URL: str = "https://discord.com/api"

# Ed25519: 32 bytes de chave pública em hex
_PUBLIC_KEY_HEX_LENGTH = 64


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        public_key: Chave pública (hex) usada em toda verificação de assinatura
        bot_token: Token do bot, usado apenas no registro do comando
        application_id: ID da aplicação Discord
        api_version: Versão da API
        api_base_url: URL base da API
        request_timeout_seconds: Timeout das chamadas administrativas
        max_retries: Máximo de tentativas das chamadas administrativas
    """

    public_key: str = ""
    bot_token: str = ""
    application_id: str = ""

    api_version: str = DISCORD_API_VERSION
    api_base_url: str = DISCORD_API_BASE_URL

    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    @property
    def commands_endpoint(self) -> str:
        """URL de registro de comandos globais da aplicação.

        Raises:
            ValueError: Se application_id não estiver configurado.
        """
        if not self.application_id:
            raise ValueError("application_id é obrigatório")
        return f"{self.api_endpoint}/applications/{self.application_id}/commands"

    def validate(self) -> list[str]:
        """Valida o mínimo para atender interações.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []
        if not self.public_key:
            errors.append("DISCORD_PUBLIC_KEY não configurado")
        elif len(self.public_key) != _PUBLIC_KEY_HEX_LENGTH:
            errors.append("DISCORD_PUBLIC_KEY deve ter 64 caracteres hex")
        if self.request_timeout_seconds <= 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if self.max_retries < 0:
            errors.append("DISCORD_MAX_RETRIES deve ser >= 0")
        return errors

    def validate_registration(self) -> list[str]:
        """Valida credenciais exigidas pelo registro do comando."""
        errors: list[str] = []
        if not self.bot_token:
            errors.append("DISCORD_BOT_TOKEN não configurado")
        if not self.application_id:
            errors.append("DISCORD_APPLICATION_ID não configurado")
        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente."""
    return DiscordSettings(
        public_key=os.getenv("DISCORD_PUBLIC_KEY", "").strip(),
        bot_token=os.getenv("DISCORD_BOT_TOKEN", "").strip(),
        application_id=os.getenv("DISCORD_APPLICATION_ID", "").strip(),
        api_version=os.getenv("DISCORD_API_VERSION", DISCORD_API_VERSION),
        api_base_url=os.getenv("DISCORD_API_BASE_URL", DISCORD_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("DISCORD_MAX_RETRIES", "3")),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
