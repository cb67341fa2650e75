"""Document data models."""
from dataclasses import dataclass

@dataclass
class Document:
    """Represents a decoded source file."""
    filename: str
    text: str  # Raw extracted text, not yet normalized
