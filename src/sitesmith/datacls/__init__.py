from .options import BuildOptions
from .files import StaticFile
from .contexts import BuildContext

__all__ = [
    'BuildOptions',
    'StaticFile',
    'BuildContext',
]
