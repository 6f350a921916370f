"""Falling Blocks: a falling-block puzzle rules engine with pygame and gymnasium hosts."""
