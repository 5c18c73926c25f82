from pathlib import Path
from typing import BinaryIO, Union

from clictx.models import Config


class Codec:
    """Serializes a Config into a sink and reads one back from a path.

    Implementations must raise FileNotFoundError from ``load`` when the
    path does not exist; the store maps that to ContextNotFoundError.
    """

    def write(self, config: Config, fp: BinaryIO):
        raise NotImplementedError

    def load(self, path: Union[str, Path]) -> Config:
        raise NotImplementedError


class RawCodec(Codec):
    """Passes the document body through unchanged"""

    def write(self, config: Config, fp: BinaryIO):
        fp.write(config.body)

    def load(self, path: Union[str, Path]) -> Config:
        return Config(body=Path(path).read_bytes())
