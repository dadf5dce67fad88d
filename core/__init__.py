from .prompt_manager import PromptManager
from .telemetry import TelemetryManager

__all__ = ["PromptManager", "TelemetryManager"]
