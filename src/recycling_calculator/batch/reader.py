"""Load request lines from a plain text file or an archive."""
from pathlib import Path
import tarfile
import tempfile
import zipfile

import py7zr

from recycling_calculator.common.logger import logger


def read_operations(input_file: Path) -> str:
    """
    Return the text content of an input file or of the first .txt file inside an archive.

    :param Path input_file: Path to the input file or archive

    :return: Request lines as a single string
    :rtype: str
    :raises ValueError: If the archive format is unsupported or contains no .txt file
    """
    if input_file.suffix == ".txt":
        return input_file.read_text(encoding="utf-8")
    return extract_archive(input_file)


def extract_archive(archive_path: Path) -> str:
    """
    Extract the first .txt file found in a supported archive and return its content.

    Supported formats:
    - .zip
    - .tar.xz
    - .7z

    :param Path archive_path: Path to the archive file

    :return: Content of the extracted .txt file
    :rtype: str
    :raises ValueError: If no .txt file is found or format is unsupported
    """
    # Create a temporary directory for safe extraction
    with tempfile.TemporaryDirectory() as tmpdir:
        tmpdir_path = Path(tmpdir)

        if archive_path.suffix == ".zip":
            with zipfile.ZipFile(archive_path, "r") as zf:
                member = _first_txt(zf.namelist(), archive_path)
                zf.extract(member, path=tmpdir_path)

        elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
            with tarfile.open(archive_path, "r:xz") as tf:
                member = _first_txt([m.name for m in tf.getmembers()], archive_path)
                tf.extract(member, path=tmpdir_path, filter="data")

        elif archive_path.suffix == ".7z":
            with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                member = _first_txt(archive.getnames(), archive_path)
                archive.extract(targets=[member], path=tmpdir_path)

        else:
            raise ValueError(f"📄❌ Unsupported archive format: {''.join(archive_path.suffixes)}")

        logger.info(f"📦 Extracted {member} from {archive_path.name}")
        return (tmpdir_path / member).read_text(encoding="utf-8")


def _first_txt(names: list[str], archive_path: Path) -> str:
    """
    Return the first archive member name ending in .txt.

    :param list names: Member names listed by the archive
    :param Path archive_path: Archive path used in error messages

    :return: Name of the first .txt member
    :rtype: str
    :raises ValueError: If the archive holds no .txt file
    """
    txt_files = [name for name in names if name.endswith(".txt")]
    if not txt_files:
        raise ValueError(f"📄❌ No .txt file found in archive {archive_path.name}")
    return txt_files[0]
