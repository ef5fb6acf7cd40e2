from .element_database import ElementDatabase, ElementAttributes

__all__ = ["ElementDatabase", "ElementAttributes"]
