"""licenseguard — dependency inventory and license compliance checks."""

__version__ = "0.1.0"
