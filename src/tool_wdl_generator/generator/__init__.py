"""WDL generation for command line tools.

Provides:
- Settings loaded from .env
- Structured logging
- A small CLI surface
- Translation of a tool's argument model into WDL template properties
"""
