"""
models/ - Domain Models
=======================
Transient request/response shapes. Nothing here is persisted or mutated.
"""
