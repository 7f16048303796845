"""
DreamHome API — Application Package Initializer
=================================================

What:  HTTP API over the DreamHome property-management database.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Table Access)       │  ← one SQL statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy tables + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
