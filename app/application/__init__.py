"""Application layer: interfaces, DTOs, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (table, blob, topic, queue backends).
"""
