"""Gymnasium environments for BlockTris."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="BlockTris-10x16-v0",
    entry_point="blocktris.env.blocktris_env:BlockTrisEnv",
)

__all__ = ["BlockTris-10x16-v0"]
