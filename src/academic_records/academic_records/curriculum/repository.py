from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Career, CatalogModule


class CareerRepository(Protocol):
    def get_by_name(self, name: str) -> Optional[Career]:
        raise NotImplementedError

    def list_general_modules(self) -> Sequence[CatalogModule]:
        raise NotImplementedError
