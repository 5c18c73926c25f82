"""clictx - named CLI contexts stored on disk, with one default"""

from clictx.logger import logger

from clictx.codec import Codec, RawCodec
from clictx.errors import ContextError, ContextExistsError, ContextNotFoundError
from clictx.models import Config
from clictx.storage import ContextStorage

__version__ = "0.1.0"

# Silent unless the application calls clictx.logger.configure_logging()
logger.disable("clictx")

__all__ = [
    "Codec",
    "Config",
    "ContextError",
    "ContextExistsError",
    "ContextNotFoundError",
    "ContextStorage",
    "RawCodec",
    "__version__",
]
