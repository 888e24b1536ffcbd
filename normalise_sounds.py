from pathlib import Path

import subprocess
import shutil
import sys

DIRECTORY = Path("./src/looptimer/assets/sounds/")
CATALOG_NAMES = tuple(f"sound{index}.wav" for index in range(1, 6))

LOUDNESS_RANGE = 11.0
TARGET_LUFS = -14.0
TRUE_PEAK = -1.0

def buildNormaliseCommand(wavFilePath: Path, outputPath: Path) -> list[str]:
    return [
        "ffmpeg",
        "-y",
        "-i", str(wavFilePath),
        "-af",
        f"loudnorm=I={TARGET_LUFS}:TP={TRUE_PEAK}:LRA={LOUDNESS_RANGE}",
        "-ar", "44100",
        "-ac", "1",
        "-sample_fmt", "s16",
        str(outputPath)
    ]

def normaliseWAV(wavFilePath: Path):
    tempPath = wavFilePath.with_suffix(".normalized.wav")

    subprocess.run(buildNormaliseCommand(wavFilePath, tempPath), check=True)
    shutil.move(tempPath, wavFilePath)

def missingCatalogEntries(directory: Path) -> list[str]:
    return [name for name in CATALOG_NAMES if not (directory / name).is_file()]

def main(directory: Path = DIRECTORY) -> int:
    missing = missingCatalogEntries(directory)

    if missing:
        print(f"catalog incomplete, missing: {', '.join(missing)}")
        return 1

    for name in CATALOG_NAMES:
        print(f"normalising {name}")
        normaliseWAV(directory / name)

    print("catalog normalised")
    return 0

if __name__ == "__main__":
    sys.exit(main(Path(sys.argv[1]) if len(sys.argv) > 1 else DIRECTORY))
