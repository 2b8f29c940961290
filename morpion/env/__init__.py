"""Gymnasium wrapper around the Morpion board."""

from .gym_env import MorpionEnv

__all__ = ["MorpionEnv"]
