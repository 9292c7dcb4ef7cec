"""
Collaborator Interfaces

Narrow protocols for everything the hook manager talks to outside itself.
Implementations (game signal interception, action dispatch, bait menus) live
outside this package and are injected at construction.
"""

from typing import Protocol

from core.state import ActionKind, BiteType, ChangeBaitResult, FishingPhase


class SignalSource(Protocol):
    @property
    def fishing_phase(self) -> FishingPhase: ...

    @property
    def bite_type(self) -> BiteType: ...

    def has_status(self, status_id: int) -> bool: ...

    def in_spectral_current(self) -> bool: ...


class ActionDispatcher(Protocol):
    """Fire-and-forget requests to the game control layer"""

    def cast_delayed(self, action_id: int, kind: ActionKind, label: str = "") -> None: ...

    def cast_no_delay(self, action_id: int, kind: ActionKind, label: str = "") -> None: ...


class ResourceOracle(Protocol):
    def action_available(self, action_id: int) -> bool: ...

    def can_cast(self) -> bool: ...


class BaitControl(Protocol):
    @property
    def current(self) -> int: ...

    def change_bait(self, bait) -> ChangeBaitResult: ...


class ConfigStore(Protocol):
    """Presets plus the general settings the hook manager reads every tick"""

    @property
    def presets(self): ...

    def save(self) -> None: ...

    def load_plugin_enabled(self) -> bool: ...

    def load_delay_range(self) -> tuple: ...

    def load_reset_afk_timer(self) -> bool: ...

    def load_show_status_header(self) -> bool: ...
