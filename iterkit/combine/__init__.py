from .chain import chain
from .zip import zip_

__all__ = ("chain", "zip_")
