from typing import Optional, Union, Tuple
from pathlib import Path

ROOT_ASSET_DIRECTORY = Path(__file__).resolve().parent / "assets"

anySuffixes = Optional[Union[str, Tuple[str, ...]]]

class AssetController:
    def __init__(self, folder: str = "", root: Optional[Path] = None) -> None:
        self.folder = folder
        self.root = Path(root) if root is not None else ROOT_ASSET_DIRECTORY

    def getAsset(self, relativePath: str) -> Path:
        return self.root / self.folder / relativePath

    def hasAsset(self, relativePath: str) -> bool:
        return self.getAsset(relativePath).is_file()

    def listDirectory(self, relativePath: str = "", suffixes: anySuffixes = None) -> list[Path]:
        return sorted(self.iterateDirectory(relativePath, suffixes))

    def iterateDirectory(self, relativePath: str = "", suffixes: anySuffixes = None):
        directory = self.getAsset(relativePath)

        if not directory.is_dir():
            return

        if suffixes is None:
            for item in directory.iterdir():
                yield item
        else:
            # normalize to tuple for consistency
            suffixTuple = (suffixes,) if isinstance(suffixes, str) else suffixes
            suffixTuple = tuple(s.lower() for s in suffixTuple)

            for item in directory.iterdir():
                if (not item.is_file()) or (item.suffix.lower() not in suffixTuple):
                    continue

                yield item
