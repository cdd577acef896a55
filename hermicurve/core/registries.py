from typing import Callable, TYPE_CHECKING
if TYPE_CHECKING:
    from .curve import Curve

PresetFactory = Callable[[], "Curve"]

preset_registry: dict[str, PresetFactory] = {}


def register_preset(name: str):
    def _decorator(fn: PresetFactory) -> PresetFactory:
        if not name or name in preset_registry:
            raise ValueError(f"Invalid or duplicate preset name '{name}'")
        preset_registry[name] = fn
        return fn
    return _decorator
