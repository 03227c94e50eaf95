from abc import ABC, abstractmethod
from typing import Any

from core.store import AppState


class View(ABC):
    @abstractmethod
    def render(self, state: AppState, **kwargs: Any) -> str:
        ...
