from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """A context document. The store treats the body as opaque bytes."""
    body: bytes = b""

    @classmethod
    def from_text(cls, text: str):
        """Create a config from UTF-8 text"""
        return cls(body=text.encode("utf-8"))

    @property
    def text(self) -> str:
        """Decode the body as UTF-8"""
        return self.body.decode("utf-8")
