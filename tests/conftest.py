from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pytest


@dataclass
class RecordingEventLogger:
    """Collects events instead of printing them."""
    infos: List[Tuple[str, Optional[Dict[str, Any]]]] = field(default_factory=list)
    errors: List[Tuple[str, Optional[BaseException]]] = field(default_factory=list)

    def info(self, message: str, payload: Optional[Dict[str, Any]] = None) -> None:
        self.infos.append((message, payload))

    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.errors.append((message, cause))

    @property
    def info_messages(self) -> List[str]:
        return [message for message, _ in self.infos]


@pytest.fixture
def events() -> RecordingEventLogger:
    return RecordingEventLogger()
