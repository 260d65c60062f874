from typing import List

from openshapes.core.exceptions import BackendNotFound


class VisualisationRegistry:
    _backends = {}

    @classmethod
    def register(cls, backend):
        cls._backends[backend.name] = backend

    @classmethod
    def unregister(cls, name: str):
        cls._backends.pop(name, None)

    @classmethod
    def get(cls, name: str):
        if name not in cls._backends:
            raise BackendNotFound(
                f"Backend '{name}' not registered. "
                f"Available: {', '.join(cls.names()) or 'none'}."
            )
        return cls._backends[name]

    @classmethod
    def names(cls) -> List[str]:
        return sorted(cls._backends)
