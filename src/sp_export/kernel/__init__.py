"""Kernel – errors and value types shared by every layer."""
