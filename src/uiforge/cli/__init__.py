"""
CLI Command Modules

Each module contains a logical group of related commands; main.py
registers them on the top-level app.
"""

from uiforge.cli import catalog, codegen, document, history

__all__ = ['catalog', 'codegen', 'document', 'history']
