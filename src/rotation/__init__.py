# src/rotation/__init__.py — v1
