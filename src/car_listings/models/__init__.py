"""Data models."""

from .car import Car, CarPayload

__all__ = ["Car", "CarPayload"]
