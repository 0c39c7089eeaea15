"""Typed command builders layered over the one-shot runner."""

from .base import CommandGroup, EraCommandGroup, optional_flag, parse_int_token, split_lines, switch

__all__ = ["CommandGroup", "EraCommandGroup", "optional_flag", "parse_int_token", "split_lines", "switch"]
