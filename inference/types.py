from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class ModelRequest:
    system_prompt: str
    prompt: str                # user message, already trimmed
    temperature: float = 0.3
    max_tokens: int = 2000
    timeout_s: Optional[float] = 30


@dataclass
class ModelResponse:
    output: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
