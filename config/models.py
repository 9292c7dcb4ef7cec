# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Preset data model: hook, fish, auto-cast and extra configuration bundles.
# Dataclasses round-trip through plain dicts for the JSON settings file.

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Optional

from core.exceptions import ConfigError
from core.state import ActionKind, BiteType, HookType, StepKind

from .ids import Actions

# Steps a stop-after-caught rule may force
STOP_STEPS = (StepKind.QUITTING, StepKind.NONE)


def _new_id() -> str:
    return uuid.uuid4().hex


def _enum(enum_cls, raw, default):
    if raw is None:
        return default
    try:
        if enum_cls in (HookType, StepKind):
            return enum_cls[str(raw).upper()]
        return enum_cls(str(raw).lower())
    except (KeyError, ValueError) as e:
        raise ConfigError(f"Invalid {enum_cls.__name__}: {raw!r}") from e


@dataclass
class BaitFish:
    """A bait or a fish, identified by its game item id"""
    id: int = 0
    name: str = "-"

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "BaitFish":
        data = data or {}
        return cls(id=int(data.get("id", 0)), name=str(data.get("name", "-")))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass
class ActionCast:
    """An action the engine may dispatch when it is enabled and available"""
    id: int = 0
    name: str = ""
    kind: ActionKind = ActionKind.ACTION
    enabled: bool = False
    priority: int = 0

    def is_available_to_cast(self, oracle) -> bool:
        return self.enabled and oracle.action_available(self.id)

    @classmethod
    def from_dict(cls, data: Optional[dict], **defaults) -> "ActionCast":
        data = {**defaults, **(data or {})}
        return cls(
            id=int(data.get("id", 0)),
            name=str(data.get("name", "")),
            kind=_enum(ActionKind, data.get("kind"), ActionKind.ACTION),
            enabled=bool(data.get("enabled", False)),
            priority=int(data.get("priority", 0)),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "enabled": self.enabled,
            "priority": self.priority,
        }


@dataclass
class IdenticalCastRule(ActionCast):
    """Identical Cast, only once the fish has been caught often enough"""
    only_after_count: int = 0

    def is_available_to_cast(self, oracle, caught_count: int = 0) -> bool:
        if caught_count < self.only_after_count:
            return False
        return super().is_available_to_cast(oracle)

    @classmethod
    def from_dict(cls, data: Optional[dict], **defaults) -> "IdenticalCastRule":
        base = ActionCast.from_dict(data, **defaults)
        return cls(
            **{k: getattr(base, k) for k in ("id", "name", "kind", "enabled", "priority")},
            only_after_count=int((data or {}).get("only_after_count", 0)),
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["only_after_count"] = self.only_after_count
        return data


@dataclass
class HookRule:
    """Maps a bite type inside an elapsed-time window to a hook"""
    bite: BiteType
    hook: HookType = HookType.NORMAL
    min_seconds: float = 0.0
    max_seconds: float = 0.0  # 0 means no upper bound

    def matches(self, bite: BiteType, elapsed: float) -> bool:
        if bite != self.bite:
            return False
        if elapsed < self.min_seconds:
            return False
        return not self.max_seconds or elapsed <= self.max_seconds

    @classmethod
    def from_dict(cls, data: dict) -> "HookRule":
        if "bite" not in data:
            raise ConfigError(f"Hook rule without bite type: {data!r}")
        return cls(
            bite=_enum(BiteType, data["bite"], BiteType.UNKNOWN),
            hook=_enum(HookType, data.get("hook"), HookType.NORMAL),
            min_seconds=float(data.get("min_seconds", 0)),
            max_seconds=float(data.get("max_seconds", 0)),
        )

    def to_dict(self) -> dict:
        return {
            "bite": self.bite.value,
            "hook": self.hook.name,
            "min_seconds": self.min_seconds,
            "max_seconds": self.max_seconds,
        }


@dataclass
class Hookset:
    rules: list = field(default_factory=list)
    timeout_max: float = 0.0
    let_fish_escape_double: bool = False
    let_fish_escape_triple: bool = False
    stop_after_caught: bool = False
    stop_after_caught_limit: int = 1
    stop_after_reset_count: bool = False
    stop_fishing_step: StepKind = StepKind.QUITTING
    required_status: int = 0

    def get_hook(self, bite: BiteType, elapsed: float) -> Optional[HookType]:
        """First rule matching the bite and elapsed time wins"""
        for rule in self.rules:
            if rule.matches(bite, elapsed):
                return rule.hook
        return None

    def lets_fish_escape(self, hook: HookType) -> bool:
        if hook == HookType.TRIPLE:
            return self.let_fish_escape_triple
        if hook == HookType.DOUBLE:
            return self.let_fish_escape_double
        return False

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Hookset":
        data = data or {}
        stop_step = _enum(StepKind, data.get("stop_fishing_step"), StepKind.QUITTING)
        if stop_step not in STOP_STEPS:
            raise ConfigError(f"Stop step must be Quitting or None, got {stop_step}")
        return cls(
            rules=[HookRule.from_dict(r) for r in data.get("rules", [])],
            timeout_max=float(data.get("timeout_max", 0)),
            let_fish_escape_double=bool(data.get("let_fish_escape_double", False)),
            let_fish_escape_triple=bool(data.get("let_fish_escape_triple", False)),
            stop_after_caught=bool(data.get("stop_after_caught", False)),
            stop_after_caught_limit=int(data.get("stop_after_caught_limit", 1)),
            stop_after_reset_count=bool(data.get("stop_after_reset_count", False)),
            stop_fishing_step=stop_step,
            required_status=int(data.get("required_status", 0)),
        )

    def to_dict(self) -> dict:
        return {
            "rules": [r.to_dict() for r in self.rules],
            "timeout_max": self.timeout_max,
            "let_fish_escape_double": self.let_fish_escape_double,
            "let_fish_escape_triple": self.let_fish_escape_triple,
            "stop_after_caught": self.stop_after_caught,
            "stop_after_caught_limit": self.stop_after_caught_limit,
            "stop_after_reset_count": self.stop_after_reset_count,
            "stop_fishing_step": self.stop_fishing_step.name,
            "required_status": self.required_status,
        }


@dataclass
class HookConfig:
    """Hooking behaviour for one bait or mooch"""
    bait: BaitFish = field(default_factory=BaitFish)
    enabled: bool = False
    hookset: Hookset = field(default_factory=Hookset)
    unique_id: str = field(default_factory=_new_id)

    def get_unique_id(self) -> str:
        return self.unique_id

    def get_hook(self, bite: BiteType, elapsed: float) -> Optional[HookType]:
        return self.hookset.get_hook(bite, elapsed)

    @classmethod
    def from_dict(cls, data: dict) -> "HookConfig":
        return cls(
            bait=BaitFish.from_dict(data.get("bait")),
            enabled=bool(data.get("enabled", False)),
            hookset=Hookset.from_dict(data.get("hookset")),
            unique_id=str(data.get("unique_id") or _new_id()),
        )

    def to_dict(self) -> dict:
        return {
            "bait": self.bait.to_dict(),
            "enabled": self.enabled,
            "hookset": self.hookset.to_dict(),
            "unique_id": self.unique_id,
        }


@dataclass
class FishConfig:
    """Reactions to catching one specific fish"""
    fish: BaitFish = field(default_factory=BaitFish)
    enabled: bool = False
    identical_cast: IdenticalCastRule = field(
        default_factory=lambda: IdenticalCastRule(id=Actions.IDENTICAL_CAST, name="Identical Cast")
    )
    surface_slap: ActionCast = field(
        default_factory=lambda: ActionCast(id=Actions.SURFACE_SLAP, name="Surface Slap")
    )
    mooch: ActionCast = field(default_factory=lambda: ActionCast(id=Actions.MOOCH, name="Mooch"))
    never_mooch: bool = False
    ignore_on_intuition: bool = False
    swap_bait: bool = False
    swap_bait_count: int = 1
    bait_to_swap: BaitFish = field(default_factory=BaitFish)
    swap_presets: bool = False
    swap_preset_count: int = 1
    preset_to_swap: str = ""
    stop_after_caught: bool = False
    stop_after_caught_limit: int = 1
    stop_after_reset_count: bool = False
    stop_fishing_step: StepKind = StepKind.QUITTING
    unique_id: str = field(default_factory=_new_id)

    def get_unique_id(self) -> str:
        return self.unique_id

    @classmethod
    def from_dict(cls, data: dict) -> "FishConfig":
        stop_step = _enum(StepKind, data.get("stop_fishing_step"), StepKind.QUITTING)
        if stop_step not in STOP_STEPS:
            raise ConfigError(f"Stop step must be Quitting or None, got {stop_step}")
        return cls(
            fish=BaitFish.from_dict(data.get("fish")),
            enabled=bool(data.get("enabled", False)),
            identical_cast=IdenticalCastRule.from_dict(
                data.get("identical_cast"), id=Actions.IDENTICAL_CAST, name="Identical Cast"
            ),
            surface_slap=ActionCast.from_dict(
                data.get("surface_slap"), id=Actions.SURFACE_SLAP, name="Surface Slap"
            ),
            mooch=ActionCast.from_dict(data.get("mooch"), id=Actions.MOOCH, name="Mooch"),
            never_mooch=bool(data.get("never_mooch", False)),
            ignore_on_intuition=bool(data.get("ignore_on_intuition", False)),
            swap_bait=bool(data.get("swap_bait", False)),
            swap_bait_count=int(data.get("swap_bait_count", 1)),
            bait_to_swap=BaitFish.from_dict(data.get("bait_to_swap")),
            swap_presets=bool(data.get("swap_presets", False)),
            swap_preset_count=int(data.get("swap_preset_count", 1)),
            preset_to_swap=str(data.get("preset_to_swap", "")),
            stop_after_caught=bool(data.get("stop_after_caught", False)),
            stop_after_caught_limit=int(data.get("stop_after_caught_limit", 1)),
            stop_after_reset_count=bool(data.get("stop_after_reset_count", False)),
            stop_fishing_step=stop_step,
            unique_id=str(data.get("unique_id") or _new_id()),
        )

    def to_dict(self) -> dict:
        return {
            "fish": self.fish.to_dict(),
            "enabled": self.enabled,
            "identical_cast": self.identical_cast.to_dict(),
            "surface_slap": self.surface_slap.to_dict(),
            "mooch": self.mooch.to_dict(),
            "never_mooch": self.never_mooch,
            "ignore_on_intuition": self.ignore_on_intuition,
            "swap_bait": self.swap_bait,
            "swap_bait_count": self.swap_bait_count,
            "bait_to_swap": self.bait_to_swap.to_dict(),
            "swap_presets": self.swap_presets,
            "swap_preset_count": self.swap_preset_count,
            "preset_to_swap": self.preset_to_swap,
            "stop_after_caught": self.stop_after_caught,
            "stop_after_caught_limit": self.stop_after_caught_limit,
            "stop_after_reset_count": self.stop_after_reset_count,
            "stop_fishing_step": self.stop_fishing_step.name,
            "unique_id": self.unique_id,
        }


@dataclass
class AutoCastsConfig:
    enable_all: bool = False
    cast_line: ActionCast = field(
        default_factory=lambda: ActionCast(id=Actions.CAST, name="Cast Line", enabled=True)
    )
    cast_mooch: ActionCast = field(default_factory=lambda: ActionCast(id=Actions.MOOCH, name="Mooch"))
    cast_collect: ActionCast = field(
        default_factory=lambda: ActionCast(id=Actions.COLLECT, name="Collect", kind=ActionKind.ABILITY)
    )
    actions: list = field(default_factory=list)

    def get_auto_cast_order(self) -> list:
        """Auto-cast candidates, lowest priority value first (stable)"""
        return sorted(self.actions, key=lambda a: a.priority)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "AutoCastsConfig":
        data = data or {}
        return cls(
            enable_all=bool(data.get("enable_all", False)),
            cast_line=ActionCast.from_dict(data.get("cast_line"), id=Actions.CAST, name="Cast Line", enabled=True),
            cast_mooch=ActionCast.from_dict(data.get("cast_mooch"), id=Actions.MOOCH, name="Mooch"),
            cast_collect=ActionCast.from_dict(
                data.get("cast_collect"), id=Actions.COLLECT, name="Collect", kind="ability"
            ),
            actions=[ActionCast.from_dict(a) for a in data.get("actions", [])],
        )

    def to_dict(self) -> dict:
        return {
            "enable_all": self.enable_all,
            "cast_line": self.cast_line.to_dict(),
            "cast_mooch": self.cast_mooch.to_dict(),
            "cast_collect": self.cast_collect.to_dict(),
            "actions": [a.to_dict() for a in self.actions],
        }


@dataclass
class StatusReaction:
    """What to do when a watched status is gained or lost"""
    swap_preset: bool = False
    preset_to_swap: str = ""
    swap_bait: bool = False
    bait_to_swap: BaitFish = field(default_factory=BaitFish)
    quit_on_lost: bool = False
    stop_on_lost: bool = False

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "StatusReaction":
        data = data or {}
        return cls(
            swap_preset=bool(data.get("swap_preset", False)),
            preset_to_swap=str(data.get("preset_to_swap", "")),
            swap_bait=bool(data.get("swap_bait", False)),
            bait_to_swap=BaitFish.from_dict(data.get("bait_to_swap")),
            quit_on_lost=bool(data.get("quit_on_lost", False)),
            stop_on_lost=bool(data.get("stop_on_lost", False)),
        )

    def to_dict(self) -> dict:
        return {
            "swap_preset": self.swap_preset,
            "preset_to_swap": self.preset_to_swap,
            "swap_bait": self.swap_bait,
            "bait_to_swap": self.bait_to_swap.to_dict(),
            "quit_on_lost": self.quit_on_lost,
            "stop_on_lost": self.stop_on_lost,
        }


@dataclass
class ExtraConfig:
    enabled: bool = False
    intuition_gain: StatusReaction = field(default_factory=StatusReaction)
    intuition_lost: StatusReaction = field(default_factory=StatusReaction)
    spectral_gain: StatusReaction = field(default_factory=StatusReaction)
    spectral_lost: StatusReaction = field(default_factory=StatusReaction)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ExtraConfig":
        data = data or {}
        return cls(
            enabled=bool(data.get("enabled", False)),
            intuition_gain=StatusReaction.from_dict(data.get("intuition_gain")),
            intuition_lost=StatusReaction.from_dict(data.get("intuition_lost")),
            spectral_gain=StatusReaction.from_dict(data.get("spectral_gain")),
            spectral_lost=StatusReaction.from_dict(data.get("spectral_lost")),
        )

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "intuition_gain": self.intuition_gain.to_dict(),
            "intuition_lost": self.intuition_lost.to_dict(),
            "spectral_gain": self.spectral_gain.to_dict(),
            "spectral_lost": self.spectral_lost.to_dict(),
        }


@dataclass
class Preset:
    name: str
    baits: list = field(default_factory=list)
    moochs: list = field(default_factory=list)
    fishes: list = field(default_factory=list)
    auto_casts: AutoCastsConfig = field(default_factory=AutoCastsConfig)
    extra: ExtraConfig = field(default_factory=ExtraConfig)

    def get_bait_by_id(self, bait_id: int) -> Optional[HookConfig]:
        return next((h for h in self.baits if h.bait.id == bait_id), None)

    def get_mooch_by_id(self, mooch_id: int) -> Optional[HookConfig]:
        return next((h for h in self.moochs if h.bait.id == mooch_id), None)

    def get_fish_by_id(self, fish_id: int) -> Optional[FishConfig]:
        return next((f for f in self.fishes if f.fish.id == fish_id), None)

    @classmethod
    def from_dict(cls, data: dict) -> "Preset":
        if not data.get("name"):
            raise ConfigError("Preset without a name")
        return cls(
            name=str(data["name"]),
            baits=[HookConfig.from_dict(h) for h in data.get("baits", [])],
            moochs=[HookConfig.from_dict(h) for h in data.get("moochs", [])],
            fishes=[FishConfig.from_dict(f) for f in data.get("fishes", [])],
            auto_casts=AutoCastsConfig.from_dict(data.get("auto_casts")),
            extra=ExtraConfig.from_dict(data.get("extra")),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "baits": [h.to_dict() for h in self.baits],
            "moochs": [h.to_dict() for h in self.moochs],
            "fishes": [f.to_dict() for f in self.fishes],
            "auto_casts": self.auto_casts.to_dict(),
            "extra": self.extra.to_dict(),
        }


@dataclass
class HookPresets:
    """The default preset, the user's custom presets and the current selection"""
    default_preset: Preset
    custom_presets: list = field(default_factory=list)
    selected_preset: Optional[Preset] = None

    def find_custom(self, name: str) -> Optional[Preset]:
        return next((p for p in self.custom_presets if p.name == name), None)

    @classmethod
    def from_dict(cls, data: dict) -> "HookPresets":
        if "default_preset" not in data:
            raise ConfigError("Presets payload has no default preset")
        presets = cls(
            default_preset=Preset.from_dict(data["default_preset"]),
            custom_presets=[Preset.from_dict(p) for p in data.get("custom_presets", [])],
        )
        selected = data.get("selected_preset")
        if selected:
            presets.selected_preset = presets.find_custom(selected)
        return presets

    def to_dict(self) -> dict:
        return {
            "default_preset": self.default_preset.to_dict(),
            "custom_presets": [p.to_dict() for p in self.custom_presets],
            "selected_preset": self.selected_preset.name if self.selected_preset else None,
        }
