"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnsiTheme:
    name: str
    reset: str
    header: str
    clock: str
    ram: str
    cpu: str
    gpu: str
    network: str
