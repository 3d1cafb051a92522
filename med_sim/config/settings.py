"""
MedSim — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Типізації
- Легкого доступу через config.client.backend_url
- Серіалізації в YAML
"""

from dataclasses import dataclass, field
from typing import List
import os


# =============================================================================
# CLIENT CONFIGURATION
# =============================================================================

@dataclass
class ClientConfig:
    """Параметри клієнта backend API"""

    # Backend
    backend_url: str = "http://localhost:8000"
    api_prefix: str = "/api"

    # HTTP
    timeout_seconds: float = 60.0  # генерація випадку може бути довгою
    user_agent: str = "med-sim-client/0.1"

    @property
    def api_url(self) -> str:
        """Базова адреса API, напр. http://localhost:8000/api"""
        return self.backend_url.rstrip("/") + self.api_prefix

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Створити конфігурацію з environment variables"""
        return cls(
            backend_url=os.getenv("MEDSIM_BACKEND_URL", "http://localhost:8000"),
            api_prefix=os.getenv("MEDSIM_API_PREFIX", "/api"),
            timeout_seconds=float(os.getenv("MEDSIM_TIMEOUT", "60")),
        )


# =============================================================================
# SANDBOX BACKEND CONFIGURATION
# =============================================================================

@dataclass
class ScoringConfig:
    """Бали sandbox backend (дзеркало GET /scoring-rules)"""
    correct_test_order: int = 10
    correct_diagnosis: int = 50
    helpful_question: int = 5
    incorrect_test_order: int = -5
    incorrect_diagnosis: int = -10
    irrelevant_question: int = -2


@dataclass
class SandboxConfig:
    """Конфігурація sandbox API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True

    # CORS
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = field(default_factory=lambda: ["*"])
    cors_allow_headers: List[str] = field(default_factory=lambda: ["*"])

    # Сесії
    max_sessions: int = 1000
    session_timeout_minutes: int = 120

    # API
    api_prefix: str = "/api"
    api_title: str = "MedSim Sandbox API"
    api_description: str = "Офлайн backend для симуляції клінічних випадків"

    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    @classmethod
    def from_env(cls) -> "SandboxConfig":
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("MEDSIM_API_HOST", "0.0.0.0"),
            port=int(os.getenv("MEDSIM_API_PORT", "8000")),
            debug=os.getenv("MEDSIM_API_DEBUG", "true").lower() == "true",
            max_sessions=int(os.getenv("MEDSIM_MAX_SESSIONS", "1000")),
        )


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class MedSimConfig:
    """Головна конфігурація MedSim"""
    version: str = "0.1.0"

    client: ClientConfig = field(default_factory=ClientConfig)
    sandbox: SandboxConfig = field(default_factory=SandboxConfig)

    @classmethod
    def from_env(cls) -> "MedSimConfig":
        return cls(client=ClientConfig.from_env(), sandbox=SandboxConfig.from_env())

    @classmethod
    def from_dict(cls, data: dict) -> "MedSimConfig":
        """Відновити з dict (напр. з YAML)"""
        client = ClientConfig(**data.get("client", {}))

        sandbox_data = dict(data.get("sandbox", {}))
        scoring = ScoringConfig(**sandbox_data.pop("scoring", {}))
        sandbox = SandboxConfig(scoring=scoring, **sandbox_data)

        return cls(
            version=data.get("version", cls.version),
            client=client,
            sandbox=sandbox,
        )


def get_default_config() -> MedSimConfig:
    """Отримати конфігурацію за замовчуванням"""
    return MedSimConfig()
