from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """
    The configuration of TileJigsaw.
    """
    input_path: Path
    """
    The path to the file with the tiles.
    """

    output_path: Path | None = None
    """
    The path to the assembled output image. When None, the image is not saved.
    """

    quality: int = 90
    """
    The quality of the assembled image when saved as jpeg.
    """

# ----------------------------------------------------------------------------------------------------------------------
