"""
MedSim — API Configuration

Налаштування sandbox сервера (див. med_sim.config.SandboxConfig).
"""

from med_sim.config import SandboxConfig


# Глобальна конфігурація
config = SandboxConfig.from_env()
