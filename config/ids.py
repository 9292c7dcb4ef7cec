# Copyright (C) 2026 BPS
# This file is part of BPS Auto Hook.
#
# Game action and status ids referenced directly by the hook manager.
# Everything else (auto-cast actions, baits, fish) comes from presets.


class Actions:
    CAST = 289
    HOOK = 296
    MOOCH = 297
    MOOCH2 = 268
    QUIT = 299
    SURFACE_SLAP = 4595
    IDENTICAL_CAST = 4596
    COLLECT = 4101


class Status:
    FISHERS_INTUITION = 568


# Collectible catches are reported with this offset added to the fish id
COLLECTIBLE_ID_OFFSET = 500000
